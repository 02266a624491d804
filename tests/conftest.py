import pytest
from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from django.utils import timezone
from rest_framework.test import APIClient

from competitions.models import Competition, CompetitionStatus, CompetitionType, RivalryType, CompetitionLevel
from credential.models import Credential
from userManage.models import ADMIN_GROUP, MODERATOR_GROUP

User = get_user_model()


def _user_in_group(username, group_name=None):
    user = User.objects.create_user(username=username, password='secret-pass-123', email=f'{username}@example.com')
    if group_name:
        group, _ = Group.objects.get_or_create(name=group_name)
        user.groups.add(group)
    return user


# =============================================================================
# Users
# =============================================================================

@pytest.fixture
def user(db):
    return _user_in_group('cosplayer')


@pytest.fixture
def other_user(db):
    return _user_in_group('other_cosplayer')


@pytest.fixture
def admin_user(db):
    return _user_in_group('admin', ADMIN_GROUP)


@pytest.fixture
def moderator(db):
    return _user_in_group('moderator', MODERATOR_GROUP)


@pytest.fixture
def organizer(db):
    return _user_in_group('organizer')


# =============================================================================
# Clients
# =============================================================================

@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def client_for():
    def _client(user):
        client = APIClient()
        client.force_authenticate(user=user)
        return client
    return _client


@pytest.fixture
def user_client(client_for, user):
    return client_for(user)


@pytest.fixture
def admin_client(client_for, admin_user):
    return client_for(admin_user)


# =============================================================================
# Domain objects
# =============================================================================

@pytest.fixture
def make_competition(db):
    def _make(name='Cosplay Mania 2025', status=CompetitionStatus.ACCEPTED, **kwargs):
        kwargs.setdefault('event_date', timezone.now())
        kwargs.setdefault('competition_type', CompetitionType.GENERAL)
        kwargs.setdefault('rivalry_type', RivalryType.SOLO)
        kwargs.setdefault('level', CompetitionLevel.LOCAL)
        return Competition.objects.create(name=name, status=status, **kwargs)
    return _make


@pytest.fixture
def competition(make_competition, organizer):
    return make_competition(submitted_by=organizer, location='Manila', organizer='Cosplay Guild')


@pytest.fixture
def make_credential(db):
    def _make(user, competition, **kwargs):
        kwargs.setdefault('cosplay_title', f'{competition.name} entry')
        return Credential.objects.create(user=user, competition=competition, **kwargs)
    return _make
