import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import Case, Count, IntegerField, Q, Value, When
from django.utils import timezone
from django_fsm import TransitionNotAllowed
from rest_framework.exceptions import NotFound, PermissionDenied

from badge import rules as badge_rules
from badge.services import check_and_award_badges
from cosbaii.exceptions import InvalidState
from cosbaii.tasks import after_commit
from credential.models import Credential, CredentialStatus
from notification import types as notification_types
from notification.utils import create_notification, get_users_by_group
from userManage.models import ADMIN_GROUP
from .models import Competition, CompetitionStatus

logger = logging.getLogger(__name__)

User = get_user_model()

ACCEPT = 'ACCEPT'
REJECT = 'REJECT'


def competition_queryset():
    return Competition.objects.select_related('submitted_by').annotate(
        participant_count=Count('participants', distinct=True)
    )


def get_competition(competition_id):
    try:
        return competition_queryset().get(pk=competition_id)
    except Competition.DoesNotExist:
        raise NotFound("Competition not found")


def competition_stats():
    return Competition.objects.aggregate(
        total=Count('id'),
        pending=Count('id', filter=Q(status=CompetitionStatus.SUBMITTED)),
        accepted=Count('id', filter=Q(status=CompetitionStatus.ACCEPTED)),
        rejected=Count('id', filter=Q(status=CompetitionStatus.REJECTED)),
        ongoing=Count('id', filter=Q(status=CompetitionStatus.ONGOING)),
        completed=Count('id', filter=Q(status=CompetitionStatus.COMPLETED)),
    )


def search(query, limit=20):
    """按名称/地点/主办方模糊搜索，已通过的竞赛优先"""
    if not query or len(query) < 2:
        return Competition.objects.none()

    accepted_first = Case(
        When(status=CompetitionStatus.ACCEPTED, then=Value(0)),
        When(status=CompetitionStatus.ONGOING, then=Value(1)),
        default=Value(2),
        output_field=IntegerField(),
    )
    return (
        competition_queryset()
        .filter(Q(name__icontains=query) | Q(location__icontains=query) | Q(organizer__icontains=query))
        .order_by(accepted_first, '-event_date')[:limit]
    )


def submit_competition(actor, serializer):
    """
    用户提交竞赛，进入 SUBMITTED 等待管理员审核。
    提交者和管理员都会收到通知。
    """
    submitter = User.objects.get(pk=actor.id)
    with transaction.atomic():
        competition = serializer.save(submitted_by=submitter, status=CompetitionStatus.SUBMITTED)

    logger.info("Competition %s submitted by user %s", competition.pk, actor.id)

    after_commit('competition-submitted-notification', _notify_submitted, competition.pk)
    after_commit('admin-review-notification', _notify_admins, competition.pk)
    after_commit('badge-evaluation', _evaluate_badges, actor.id)
    return competition


def create_competition(actor, serializer):
    """管理员录入的竞赛直接通过，版主录入的走提交流程"""
    if not actor.is_admin:
        return submit_competition(actor, serializer)

    admin = User.objects.get(pk=actor.id)
    with transaction.atomic():
        competition = serializer.save(
            submitted_by=admin,
            reviewed_by=admin,
            reviewed_at=timezone.now(),
            status=CompetitionStatus.ACCEPTED,
        )

    logger.info("Competition %s created and accepted by admin %s", competition.pk, actor.id)
    after_commit('badge-evaluation', _evaluate_badges, actor.id)
    return competition


def _evaluate_badges(user_id):
    check_and_award_badges(User.objects.get(pk=user_id), badge_rules.COMPETITION_SUBMISSION)


def _notify_submitted(competition_id):
    competition = Competition.objects.select_related('submitted_by').get(pk=competition_id)
    create_notification(
        competition.submitted_by,
        notification_types.COMPETITION_SUBMITTED,
        'Competition Submitted',
        f'Your competition "{competition.name}" has been submitted for admin review.',
        target=competition,
    )


def _notify_admins(competition_id):
    competition = Competition.objects.select_related('submitted_by').get(pk=competition_id)
    admins = get_users_by_group(ADMIN_GROUP).exclude(pk=competition.submitted_by_id)
    if not admins.exists():
        return
    create_notification(
        admins,
        notification_types.COMPETITION_SUBMISSION,
        'New competition submitted for review',
        f'{competition.submitted_by} submitted: "{competition.name}"',
        actor=competition.submitted_by,
        target=competition,
    )


def review_competition(actor, competition_id, action, rejection_reason=None):
    """管理员审核竞赛：SUBMITTED -> ACCEPTED / REJECTED"""
    if not actor.is_admin:
        raise PermissionDenied("Forbidden - Admin access required")

    with transaction.atomic():
        try:
            competition = Competition.objects.select_for_update().get(pk=competition_id)
        except Competition.DoesNotExist:
            raise NotFound("Competition not found")

        reviewer = User.objects.get(pk=actor.id)
        try:
            if action == ACCEPT:
                competition.accept(reviewer)
            else:
                competition.reject(reviewer, rejection_reason)
        except TransitionNotAllowed:
            raise InvalidState("Competition is not in submitted status")
        competition.save()

    logger.info("Competition %s %s by admin %s", competition.pk, competition.status, actor.id)

    if competition.submitted_by_id:
        after_commit('competition-review-notification', _notify_reviewed, competition.pk, actor.id)
    return get_competition(competition.pk)


def _notify_reviewed(competition_id, reviewer_id):
    competition = Competition.objects.select_related('submitted_by').get(pk=competition_id)
    if competition.status == CompetitionStatus.ACCEPTED:
        notification_type = notification_types.COMPETITION_ACCEPTED
        title = 'Competition accepted'
        message = f'Your competition "{competition.name}" has been approved!'
    else:
        notification_type = notification_types.COMPETITION_REJECTED
        title = 'Competition rejected'
        message = f'Your competition "{competition.name}" was rejected. Reason: {competition.rejection_reason}'

    create_notification(
        competition.submitted_by,
        notification_type,
        title,
        message,
        actor=User.objects.get(pk=reviewer_id),
        target=competition,
    )


def list_participants(competition_id):
    """某竞赛的参赛记录：待审核在前，其余按提交时间倒序"""
    get_competition(competition_id)
    pending_first = Case(
        When(status=CredentialStatus.PENDING, then=Value(0)),
        default=Value(1),
        output_field=IntegerField(),
    )
    return (
        Credential.objects.select_related('user', 'competition')
        .filter(competition_id=competition_id)
        .order_by(pending_first, '-submitted_at')
    )


def delete_competition(actor, competition):
    """删除竞赛，其下的参赛记录一并删除"""
    competition_id = competition.pk
    with transaction.atomic():
        participant_count = competition.participants.count()
        competition.delete()
    logger.info("Competition %s deleted by admin %s (%s participants removed)",
                competition_id, actor.id, participant_count)
