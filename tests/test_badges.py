import pytest
from notifications.models import Notification

from badge import rules
from badge.models import Badge, UserBadge
from badge.services import check_and_award_badges, initialize_badges
from credential.models import Position


@pytest.mark.django_db
def test_initialize_badges_is_idempotent():
    created = initialize_badges()

    assert len(created) == len(rules.BADGE_RULES)
    assert initialize_badges() == []
    assert Badge.objects.count() == len(rules.BADGE_RULES)


@pytest.mark.django_db
def test_award_is_idempotent(user, competition, make_credential):
    make_credential(user, competition)

    assert check_and_award_badges(user, rules.COMPETITION_JOIN) == ['Competition Starter']
    assert check_and_award_badges(user, rules.COMPETITION_JOIN) == []
    assert UserBadge.objects.filter(user=user).count() == 1
    assert Notification.objects.filter(recipient=user).count() == 1


@pytest.mark.django_db
def test_champion_badge(user, competition, make_credential):
    make_credential(user, competition, position=Position.CHAMPION)

    awarded = check_and_award_badges(user)

    assert 'Champion' in awarded
    assert 'Multiple Champion' not in awarded


@pytest.mark.django_db
def test_broken_rule_does_not_block_other_badges(monkeypatch, user, competition, make_credential):
    make_credential(user, competition, position=Position.CHAMPION)

    def broken(user):
        raise RuntimeError("counter failed")

    broken_rule = rules.BadgeRule('broken', 'Broken', 'never', '/x.svg', 'SPECIAL_ACHIEVEMENT', broken)
    monkeypatch.setattr('badge.services.BADGE_RULES', [broken_rule] + rules.BADGE_RULES)

    awarded = check_and_award_badges(user)

    assert 'Champion' in awarded
    assert 'Broken' not in awarded


@pytest.mark.django_db
def test_badge_progress_endpoint(user_client, user, make_competition, make_credential):
    for i in range(2):
        make_credential(user, make_competition(name=f'Con {i}'))
    check_and_award_badges(user)

    response = user_client.get('/api/user/badges/')

    assert response.status_code == 200
    body = response.json()
    assert body['earnedCount'] == 1
    progress = {item['badge']['slug']: item for item in body['badges']}
    assert progress['competition_starter']['earned'] is True
    assert progress['competition_enthusiast']['currentProgress'] == 2
    assert progress['competition_enthusiast']['progressPercentage'] == 40
    assert progress['champion']['earned'] is False
