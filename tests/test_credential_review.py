import pytest
from notifications.models import Notification
from rest_framework.exceptions import PermissionDenied

from badge.models import UserBadge
from credential import services
from credential.models import CredentialStatus
from notification import types as notification_types
from userManage.actor import Actor
from userManage.models import ROLE_USER


@pytest.fixture
def pending(user, competition, make_credential):
    return make_credential(user, competition, cosplay_title='Zelda', character_name='Zelda')


def review_url(credential):
    return f'/api/admin/credentials/{credential.pk}/review/'


def participant_review_url(competition_id, credential):
    return f'/api/admin/competitions/{competition_id}/participants/{credential.pk}/review/'


@pytest.mark.django_db
def test_admin_approves_credential(admin_client, admin_user, pending):
    response = admin_client.post(review_url(pending), {'action': 'APPROVE'}, format='json')

    assert response.status_code == 200
    body = response.json()
    assert body['message'] == 'Participant approved successfully'
    assert body['action'] == 'APPROVE'
    assert body['credential']['status'] == CredentialStatus.APPROVED

    pending.refresh_from_db()
    assert pending.status == CredentialStatus.APPROVED
    assert pending.reviewed_at is not None
    assert pending.reviewed_by == admin_user
    assert pending.cosplay_title == 'Zelda'
    assert pending.character_name == 'Zelda'


@pytest.mark.django_db
def test_admin_rejects_with_reason_and_user_is_notified(
        admin_client, user, pending, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True):
        response = admin_client.post(review_url(pending), {
            'action': 'REJECT',
            'rejectionReason': 'Photo does not match',
        }, format='json')

    assert response.status_code == 200
    assert response.json()['message'] == 'Participant rejected successfully'

    pending.refresh_from_db()
    assert pending.status == CredentialStatus.REJECTED
    assert pending.rejection_reason == 'Photo does not match'

    notification = Notification.objects.get(recipient=user)
    assert notification.data['notification_type'] == notification_types.PARTICIPANT_REJECTED
    assert 'Photo does not match' in notification.description


@pytest.mark.django_db
def test_review_through_competition_route(admin_client, competition, pending):
    response = admin_client.post(participant_review_url(competition.pk, pending), {'action': 'APPROVE'}, format='json')

    assert response.status_code == 200
    pending.refresh_from_db()
    assert pending.status == CredentialStatus.APPROVED


@pytest.mark.django_db
def test_review_through_wrong_competition_is_not_found(admin_client, make_competition, pending):
    elsewhere = make_competition(name='Elsewhere')

    response = admin_client.post(participant_review_url(elsewhere.pk, pending), {'action': 'APPROVE'}, format='json')

    assert response.status_code == 404
    assert response.json()['error'] == 'Participant not found in this competition'


@pytest.mark.django_db
def test_second_review_is_rejected(admin_client, pending):
    admin_client.post(review_url(pending), {'action': 'APPROVE'}, format='json')

    response = admin_client.post(review_url(pending), {'action': 'REJECT'}, format='json')

    assert response.status_code == 400
    assert response.json()['error'] == 'Participant already approved'
    pending.refresh_from_db()
    assert pending.status == CredentialStatus.APPROVED


@pytest.mark.django_db
def test_invalid_action(admin_client, pending):
    response = admin_client.post(review_url(pending), {'action': 'MAYBE'}, format='json')

    assert response.status_code == 400
    body = response.json()
    assert body['error'] == 'Invalid action. Must be APPROVE or REJECT'
    assert 'action' in body['details']


@pytest.mark.django_db
def test_non_admin_cannot_review(user_client, pending):
    response = user_client.post(review_url(pending), {'action': 'APPROVE'}, format='json')

    assert response.status_code == 403
    assert response.json()['error'] == 'Forbidden - Admin access required'
    pending.refresh_from_db()
    assert pending.status == CredentialStatus.PENDING


@pytest.mark.django_db
def test_review_service_checks_actor_role(user, pending):
    with pytest.raises(PermissionDenied):
        services.review(Actor(id=user.pk, role=ROLE_USER), pending.pk, services.APPROVE)


@pytest.mark.django_db
def test_approval_awards_verified_badge(admin_client, user, pending, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True):
        admin_client.post(review_url(pending), {'action': 'APPROVE'}, format='json')

    assert UserBadge.objects.filter(user=user, badge__slug='verified_cosplayer').exists()
    types = set(
        n.data['notification_type'] for n in Notification.objects.filter(recipient=user)
    )
    assert notification_types.PARTICIPANT_APPROVED in types
    assert notification_types.BADGE_AWARDED in types


@pytest.mark.django_db
def test_admin_lists_credentials_filtered_by_status(admin_client, pending, other_user, make_competition, make_credential):
    make_credential(other_user, make_competition(name='Approved Con'), status=CredentialStatus.APPROVED)

    response = admin_client.get('/api/admin/credentials/', {'status': 'PENDING'})

    assert response.status_code == 200
    assert [c['id'] for c in response.json()] == [pending.pk]
