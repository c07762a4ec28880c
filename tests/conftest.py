from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient

from apps.authentication.models import ClubRole, Profile, User
from apps.events.models import Event
from apps.teams.models import Team, TeamMembership, TeamRole


@pytest.fixture(autouse=True)
def fast_passwords(settings):
    settings.PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']


@pytest.fixture
def make_user(db):
    """Factory for principals, with a profile unless ``profile=False``"""
    counter = {'n': 0}

    def _make_user(email=None, full_name=None, club_role=ClubRole.MEMBER, profile=True, password='Str0ng-pass!'):
        counter['n'] += 1
        email = email or f"user{counter['n']}@club.test"
        user = User.objects.create_user(email=email, password=password)
        if profile:
            Profile.objects.create(
                user=user,
                full_name=full_name or f"Member {counter['n']}",
                student_id=f"S{1000 + counter['n']}",
                club_role=club_role,
            )
        return user

    return _make_user


@pytest.fixture
def make_team(db):
    def _make_team(name, handles_design_requests=False):
        return Team.objects.create(
            name=name,
            leader_title=f'{name} lead',
            handles_design_requests=handles_design_requests,
        )

    return _make_team


@pytest.fixture
def add_to_team():
    def _add(user, team, role=TeamRole.MEMBER):
        return TeamMembership.objects.create(user=user, team=team, role_in_team=role)

    return _add


@pytest.fixture
def media_team(make_team):
    return make_team('Media')


@pytest.fixture
def events_team(make_team):
    return make_team('Events')


@pytest.fixture
def design_team(make_team):
    return make_team('Design', handles_design_requests=True)


@pytest.fixture
def member(make_user, media_team, add_to_team):
    user = make_user(full_name='Mona Member')
    add_to_team(user, media_team)
    return user


@pytest.fixture
def team_leader(make_user, media_team, add_to_team):
    user = make_user(full_name='Tariq Leader')
    add_to_team(user, media_team, TeamRole.LEADER)
    return user


@pytest.fixture
def other_team_member(make_user, events_team, add_to_team):
    user = make_user(full_name='Omar Other')
    add_to_team(user, events_team)
    return user


@pytest.fixture
def club_leader(make_user):
    return make_user(full_name='Layla Club', club_role=ClubRole.CLUB_LEADER)


@pytest.fixture
def make_event(db):
    def _make_event(start=None, hours=2, **kwargs):
        start = start or timezone.now() + timedelta(days=1)
        kwargs.setdefault('title', 'Workshop')
        return Event.objects.create(start_time=start, end_time=start + timedelta(hours=hours), **kwargs)

    return _make_event


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def auth_client():
    """APIClient authenticated with the user's token"""

    def _client(user):
        client = APIClient()
        token, _ = Token.objects.get_or_create(user=user)
        client.credentials(HTTP_AUTHORIZATION=f'Token {token.key}')
        return client

    return _client
