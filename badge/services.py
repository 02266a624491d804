import logging

from django.db import IntegrityError, transaction

from notification import types as notification_types
from notification.utils import create_notification

from .models import Badge, UserBadge
from .rules import BADGE_RULES

logger = logging.getLogger(__name__)


def _get_or_create_badge(rule):
    badge, _ = Badge.objects.get_or_create(
        slug=rule.slug,
        defaults={
            'name': rule.name,
            'description': rule.description,
            'icon_url': rule.icon_url,
            'badge_type': rule.badge_type,
            'requirement': rule.requirement,
        }
    )
    return badge


def initialize_badges():
    """按规则写入徽章目录，返回新建的徽章名称"""
    created = []
    for rule in BADGE_RULES:
        if not Badge.objects.filter(slug=rule.slug).exists():
            _get_or_create_badge(rule)
            created.append(rule.name)
    return created


def check_and_award_badges(user, trigger=None):
    """
    检查所有规则，为用户补发满足条件但尚未获得的徽章。
    重复调用不会重复发放；单条规则出错只记录日志。
    """
    logger.info("Checking badges for user %s (trigger: %s)", user.pk, trigger)
    held = set(UserBadge.objects.filter(user=user).values_list('badge__slug', flat=True))
    awarded = []

    for rule in BADGE_RULES:
        if rule.slug in held:
            continue
        try:
            if not rule.is_satisfied(user):
                continue
            badge = _get_or_create_badge(rule)
            with transaction.atomic():
                UserBadge.objects.create(user=user, badge=badge)
        except IntegrityError:
            # 并发触发时另一请求已发放
            continue
        except Exception:
            logger.exception("Error checking badge condition for %s", rule.name)
            continue

        awarded.append(rule.name)
        logger.info("Awarded badge '%s' to user %s", rule.name, user.pk)
        create_notification(
            user,
            notification_types.BADGE_AWARDED,
            'New Badge Earned!',
            f'You earned the "{rule.name}" badge! {rule.description}',
        )

    return awarded


def get_badge_progress(user):
    earned = {
        ub.badge.slug: ub
        for ub in UserBadge.objects.filter(user=user).select_related('badge')
    }
    progress = []
    for rule in BADGE_RULES:
        user_badge = earned.get(rule.slug)
        current = rule.progress(user) if rule.requirement else 0
        if rule.requirement:
            percentage = min(current / rule.requirement * 100, 100)
        else:
            percentage = 100 if user_badge else 0
        progress.append({
            'badge': {
                'slug': rule.slug,
                'name': rule.name,
                'description': rule.description,
                'iconUrl': rule.icon_url,
                'type': rule.badge_type,
                'requirement': rule.requirement,
            },
            'earned': user_badge is not None,
            'awardedAt': user_badge.awarded_at if user_badge else None,
            'currentProgress': current,
            'progressPercentage': percentage,
        })
    return progress
