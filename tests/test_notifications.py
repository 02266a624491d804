import pytest
from notifications.models import Notification

from notification import types as notification_types
from notification.utils import create_notification

URL = '/api/user/notifications/'


@pytest.fixture
def inbox(user, competition):
    for i in range(3):
        create_notification(
            user,
            notification_types.PARTICIPANT_APPROVED,
            'Participation approved',
            f'Message {i}',
            target=competition,
        )
    return list(Notification.objects.filter(recipient=user))


@pytest.mark.django_db
def test_list_notifications(user_client, inbox, competition):
    response = user_client.get(URL)

    assert response.status_code == 200
    items = response.json()
    assert len(items) == 3
    assert items[0]['type'] == notification_types.PARTICIPANT_APPROVED
    assert items[0]['title'] == 'Participation approved'
    assert items[0]['relatedId'] == competition.pk
    assert items[0]['isRead'] is False


@pytest.mark.django_db
def test_unread_count_and_mark_as_read(user_client, inbox):
    assert user_client.get(f'{URL}unread-count/').json() == {'unreadCount': 3}

    response = user_client.post(f'{URL}{inbox[0].pk}/mark-as-read/')
    assert response.status_code == 200
    assert response.json()['notification']['id'] == inbox[0].pk
    assert response.json()['notification']['isRead'] is True
    assert user_client.get(f'{URL}unread-count/').json() == {'unreadCount': 2}

    user_client.post(f'{URL}mark-all-as-read/')
    assert user_client.get(f'{URL}unread-count/').json() == {'unreadCount': 0}


@pytest.mark.django_db
def test_delete_notification(user_client, user, inbox):
    response = user_client.delete(f'{URL}{inbox[0].pk}/')

    assert response.status_code == 204
    assert Notification.objects.filter(recipient=user).count() == 2


@pytest.mark.django_db
def test_cannot_touch_other_users_notifications(client_for, other_user, inbox):
    client = client_for(other_user)

    assert client.get(URL).json() == []

    response = client.post(f'{URL}{inbox[0].pk}/mark-as-read/')
    assert response.status_code == 404
    assert set(response.json()) == {'error'}

    response = client.delete(f'{URL}{inbox[0].pk}/')
    assert response.status_code == 404
    assert set(response.json()) == {'error'}
    assert Notification.objects.filter(pk=inbox[0].pk, unread=True).exists()


@pytest.mark.django_db
def test_many_recipients_need_an_actor(django_user_model, user):
    with pytest.raises(ValueError):
        create_notification(django_user_model.objects.all(), notification_types.BADGE_AWARDED, 'x', 'y')


@pytest.mark.django_db
def test_list_filters_by_unread_and_type(user_client, user, inbox):
    create_notification(user, notification_types.BADGE_AWARDED, 'New Badge Earned!', 'badge')
    inbox[0].mark_as_read()

    unread = user_client.get(URL, {'unread': 'true'}).json()
    assert len(unread) == 3

    badges = user_client.get(URL, {'type': notification_types.BADGE_AWARDED}).json()
    assert [n['title'] for n in badges] == ['New Badge Earned!']
