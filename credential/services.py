"""
参赛记录的业务流程：提交、查询、审核、排序、删除。

所有函数接收显式的 Actor，不读取 request；主操作在独立事务中完成，
通知、徽章、图片清理等副作用在事务提交后以"尽力而为"的方式执行。
"""
import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django_fsm import TransitionNotAllowed
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from badge import rules as badge_rules
from badge.services import check_and_award_badges
from competitions.models import Competition
from cosbaii.exceptions import Conflict, InvalidState
from cosbaii.tasks import after_commit
from notification import types as notification_types
from notification.utils import create_notification

from .assets import delete_asset
from .models import Credential, CredentialStatus

logger = logging.getLogger(__name__)

User = get_user_model()

APPROVE = 'APPROVE'
REJECT = 'REJECT'


def credential_queryset():
    return Credential.objects.select_related('user', 'competition')


def _get_owned(actor, credential_id):
    try:
        credential = credential_queryset().get(pk=credential_id)
    except Credential.DoesNotExist:
        raise NotFound("Credential not found")

    if credential.user_id != actor.id:
        logger.warning("User %s tried to access credential %s owned by %s",
                       actor.id, credential_id, credential.user_id)
        raise PermissionDenied("Forbidden: You can only manage your own credentials")
    return credential


def get_open_competition(competition_id):
    """竞赛必须存在且处于已通过/进行中状态"""
    try:
        competition = Competition.objects.select_related('submitted_by').get(pk=competition_id)
    except Competition.DoesNotExist:
        raise NotFound("Competition not found")

    if not competition.is_open_for_participants:
        raise InvalidState("This competition is not accepting participants")
    return competition


def _already_submitted(user_id, competition):
    return Credential.objects.filter(user_id=user_id, competition=competition).exists()


# ---------------------------------------------------------
# 提交
# ---------------------------------------------------------
def submit(actor, competition_id, fields):
    """
    提交参赛记录，初始状态为 PENDING。
    fields 为已校验的模型字段（见 CredentialSubmitSerializer.to_model_fields）。
    """
    # 1. 竞赛状态校验：只有已通过/进行中的竞赛接受参赛记录
    competition = get_open_competition(competition_id)

    # 2. 重复提交校验（并发时由唯一约束兜底）
    if _already_submitted(actor.id, competition):
        raise Conflict("You have already submitted a credential for this competition")

    try:
        with transaction.atomic():
            fields.setdefault('order', Credential.objects.filter(user_id=actor.id).count())
            credential = Credential.objects.create(
                user_id=actor.id,
                competition=competition,
                status=CredentialStatus.PENDING,
                **fields
            )
    except IntegrityError:
        raise Conflict("You have already submitted a credential for this competition")

    logger.info("Credential %s submitted by user %s for competition %s",
                credential.pk, actor.id, competition.pk)

    # 3. 副作用：徽章检查、通知竞赛提交者
    after_commit('badge-evaluation', _evaluate_badges, actor.id, badge_rules.COMPETITION_JOIN)
    if competition.submitted_by_id:
        after_commit('submission-notification', _notify_submission, credential.pk)

    return credential_queryset().get(pk=credential.pk)


def _evaluate_badges(user_id, trigger):
    user = User.objects.get(pk=user_id)
    check_and_award_badges(user, trigger)


def _notify_submission(credential_id):
    credential = credential_queryset().select_related('competition__submitted_by').get(pk=credential_id)
    competition = credential.competition
    participant = credential.user
    create_notification(
        competition.submitted_by,
        notification_types.PARTICIPANT_SUBMITTED,
        'New participant submission',
        f'{participant} submitted "{credential.cosplay_title}" for "{competition.name}".',
        actor=participant,
        target=competition,
    )


# ---------------------------------------------------------
# 查询
# ---------------------------------------------------------
def list_credentials(actor):
    """当前用户的全部参赛记录，按 order 升序、提交时间倒序"""
    return credential_queryset().filter(user_id=actor.id).order_by('order', '-submitted_at')


def get_for_competition(actor, competition_id):
    try:
        return credential_queryset().get(user_id=actor.id, competition_id=competition_id)
    except Credential.DoesNotExist:
        raise NotFound("Credential not found")


def get_by_id(actor, credential_id):
    return _get_owned(actor, credential_id)


# ---------------------------------------------------------
# 审核
# ---------------------------------------------------------
def review(actor, credential_id, action, rejection_reason=None, competition_id=None):
    """
    管理员审核：PENDING -> APPROVED / REJECTED。
    已审核的记录不允许再次审核。
    """
    if not actor.is_admin:
        raise PermissionDenied("Forbidden - Admin access required")
    if action not in (APPROVE, REJECT):
        raise ValidationError({"action": ["Invalid action. Must be APPROVE or REJECT"]})

    with transaction.atomic():
        queryset = credential_queryset().select_for_update(of=('self',))
        if competition_id is not None:
            queryset = queryset.filter(competition_id=competition_id)
        try:
            credential = queryset.get(pk=credential_id)
        except Credential.DoesNotExist:
            raise NotFound("Participant not found in this competition"
                           if competition_id is not None else "Credential not found")

        reviewer = User.objects.get(pk=actor.id)
        try:
            if action == APPROVE:
                credential.approve(reviewer)
            else:
                credential.reject(reviewer, rejection_reason)
        except TransitionNotAllowed:
            raise InvalidState(f"Participant already {credential.status.lower()}")

        credential.save(update_fields=['status', 'reviewed_at', 'reviewed_by', 'rejection_reason', 'updated_at'])

    logger.info("Credential %s %s by admin %s", credential.pk, credential.status, actor.id)

    after_commit('review-notification', _notify_review, credential.pk, actor.id)
    if credential.status == CredentialStatus.APPROVED:
        after_commit('badge-evaluation', _evaluate_badges, credential.user_id, badge_rules.VERIFICATION)

    return credential


def _notify_review(credential_id, reviewer_id):
    credential = credential_queryset().get(pk=credential_id)
    competition = credential.competition
    reviewer = User.objects.get(pk=reviewer_id)

    if credential.status == CredentialStatus.APPROVED:
        notification_type = notification_types.PARTICIPANT_APPROVED
        title = 'Participation approved'
        message = f'Your participation in "{competition.name}" has been approved!'
    else:
        notification_type = notification_types.PARTICIPANT_REJECTED
        title = 'Participation rejected'
        message = f'Your participation in "{competition.name}" was rejected.'
        if credential.rejection_reason:
            message = f'{message} Reason: {credential.rejection_reason}'

    create_notification(credential.user, notification_type, title, message, actor=reviewer, target=competition)


# ---------------------------------------------------------
# 排序
# ---------------------------------------------------------
def reorder(actor, items):
    """
    items: [{"id": 3, "order": 0}, ...]，缺省 order 时取在列表中的位置。
    所有记录必须属于当前用户；全部更新在同一事务中完成。
    """
    if not items:
        raise ValidationError({"credentials": ["Invalid credentials array"]})

    ids = [item['id'] for item in items]
    if len(ids) != len(set(ids)):
        raise ValidationError({"credentials": ["Duplicate credential ids"]})

    with transaction.atomic():
        owned = {
            c.pk: c
            for c in Credential.objects.select_for_update().filter(pk__in=ids, user_id=actor.id)
        }
        if len(owned) != len(ids):
            logger.warning("User %s tried to reorder credentials they do not own: %s",
                           actor.id, sorted(set(ids) - set(owned)))
            raise PermissionDenied("Some credentials do not belong to you")

        for index, item in enumerate(items):
            credential = owned[item['id']]
            credential.order = item.get('order', index)
        Credential.objects.bulk_update(owned.values(), ['order'])

    logger.info("User %s reordered %s credentials", actor.id, len(ids))
    return len(ids)


# ---------------------------------------------------------
# 删除
# ---------------------------------------------------------
def delete(actor, credential_id):
    """
    删除自己的参赛记录（任何审核状态都可以删除）。
    图片清理和通知在删除提交后执行，失败不影响删除结果。
    """
    with transaction.atomic():
        credential = _get_owned(actor, credential_id)
        image_url = credential.image_url
        competition = credential.competition
        title = credential.cosplay_title
        credential.delete()

    logger.info("Credential %s deleted by user %s", credential_id, actor.id)

    if image_url:
        after_commit('asset-cleanup', delete_asset, image_url)
    if settings.COSBAII_NOTIFY_ON_CREDENTIAL_DELETE:
        after_commit('deletion-notification', _notify_deletion, actor.id, competition.pk, title)

    return credential_id


def _notify_deletion(user_id, competition_id, cosplay_title):
    user = User.objects.get(pk=user_id)
    competition = Competition.objects.filter(pk=competition_id).first()
    competition_name = competition.name if competition else 'a competition'
    create_notification(
        user,
        notification_types.CREDENTIAL_DELETED,
        'Credential deleted',
        f'Your credential "{cosplay_title}" for "{competition_name}" has been deleted.',
        target=competition,
    )
