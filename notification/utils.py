import logging

from django.contrib.auth import get_user_model
from notifications.signals import notify

logger = logging.getLogger(__name__)

User = get_user_model()


def get_users_by_group(group_name):
    """根据组名获取用户列表"""
    return User.objects.filter(groups__name=group_name)


def create_notification(recipient, notification_type, title, message, actor=None, target=None):
    """
    写入一条站内通知。
    recipient 可以是单个用户或 QuerySet；target 一般是关联的竞赛。
    """
    sender = actor if actor is not None else recipient
    if not isinstance(sender, User):
        # recipient 为 QuerySet 时 actor 必须显式给出
        raise ValueError("create_notification needs an actor when sending to many recipients")

    notify.send(
        sender,
        recipient=recipient,
        verb=title,
        description=message,
        target=target,
        notification_type=notification_type,
        title=title,
        related_id=target.pk if target is not None else None,
    )
    logger.info("Notification %s sent (related_id=%s)", notification_type, target.pk if target is not None else None)
