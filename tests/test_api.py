from datetime import timedelta

import pytest
from django.db import OperationalError
from django.urls import reverse
from django.utils import timezone

from apps.contact.models import ContactMessage
from apps.hours import utils as hour_utils
from apps.hours.models import HourRequest

pytestmark = pytest.mark.django_db


class TestAuthentication:
    def test_register_and_login(self, api_client):
        response = api_client.post(reverse('authentication:register'), {
            'email': 'fresh@club.test',
            'password': 'Str0ng-pass!',
            'password_confirm': 'Str0ng-pass!',
            'full_name': 'Fresh Face',
            'joining_reason': 'To volunteer',
        }, format='json')

        assert response.status_code == 201
        assert response.data['token']
        assert response.data['profile']['club_role'] == 'member'

        response = api_client.post(reverse('authentication:login'), {
            'email': 'fresh@club.test', 'password': 'Str0ng-pass!'
        }, format='json')
        assert response.status_code == 200
        assert response.data['profile_complete'] is True

    def test_password_mismatch(self, api_client):
        response = api_client.post(reverse('authentication:register'), {
            'email': 'fresh@club.test',
            'password': 'Str0ng-pass!',
            'password_confirm': 'different-pass!',
            'full_name': 'Fresh Face',
        }, format='json')

        assert response.status_code == 400
        assert response.data['code'] == 'validation_failed'

    def test_anonymous_is_rejected(self, api_client):
        response = api_client.get(reverse('authentication:current_user'))
        assert response.status_code == 401


class TestProfilePage:
    def test_incomplete_profile(self, make_user, auth_client):
        client = auth_client(make_user(profile=False))

        response = client.get(reverse('authentication:current_user'))

        assert response.status_code == 200
        assert response.data == {'profile_complete': False}

    def test_profile_bundle(self, team_leader, auth_client):
        response = auth_client(team_leader).get(reverse('authentication:current_user'))

        assert response.status_code == 200
        assert response.data['profile']['full_name'] == 'Tariq Leader'
        assert response.data['team']['name'] == 'Media'
        assert response.data['permission_groups'] == ['general', 'team_leadership']
        assert response.data['review_visibility'] == 'team'
        assert response.data['hours'] == {'event_hours': 0.0, 'extra_hours': 0.0, 'total_hours': 0.0}

    def test_completing_profile(self, make_user, auth_client):
        client = auth_client(make_user(profile=False))

        response = client.put(reverse('authentication:profile'), {'full_name': 'Late Comer'}, format='json')

        assert response.status_code == 201
        assert client.get(reverse('authentication:current_user')).data['profile_complete'] is True

    def test_members_cannot_promote_themselves(self, member, auth_client):
        response = auth_client(member).patch(
            reverse('authentication:profile'), {'club_role': 'club_leader'}, format='json'
        )

        assert response.status_code == 200
        assert response.data['club_role'] == 'member'

    def test_store_failure_is_retryable(self, member, auth_client, monkeypatch):
        def broken(user):
            raise OperationalError('database is locked')

        monkeypatch.setattr('apps.authentication.views.load_profile_bundle', broken)

        response = auth_client(member).get(reverse('authentication:current_user'))

        assert response.status_code == 503
        assert response.data['code'] == 'store_unavailable'


class TestHourEndpoints:
    def test_submit_and_review(self, member, team_leader, auth_client):
        response = auth_client(member).post(reverse('hours:my_requests'), {
            'activity_title': 'Cleanup', 'task_description': 'Cleaned the hall after the event'
        }, format='json')
        assert response.status_code == 201
        request_id = response.data['request']['id']

        leader = auth_client(team_leader)
        pending = leader.get(reverse('hours:review_pending'))
        assert [row['id'] for row in pending.data['results']] == [request_id]

        url = reverse('hours:review', args=[request_id])
        response = leader.post(url, {'decision': 'approve', 'awarded_hours': '2.0'}, format='json')
        assert response.status_code == 200
        assert response.data['request']['status'] == 'approved'

        response = leader.post(url, {'decision': 'reject'}, format='json')
        assert response.status_code == 409
        assert response.data == {'error': 'This request has already been reviewed.', 'code': 'conflict'}

    def test_approval_moves_hours_into_member_totals(self, member, team_leader, auth_client):
        client = auth_client(member)
        leader = auth_client(team_leader)
        before = client.get(reverse('hours:my_totals')).data['extra_hours']

        response = client.post(reverse('hours:my_requests'), {
            'activity_title': 'Workshop setup', 'task_description': 'Set up chairs and projector'
        }, format='json')
        request_id = response.data['request']['id']
        assert [row['id'] for row in leader.get(reverse('hours:review_pending')).data['results']] == [request_id]

        response = leader.post(
            reverse('hours:review', args=[request_id]), {'decision': 'approve', 'awarded_hours': '4'}, format='json'
        )
        assert response.status_code == 200

        after = client.get(reverse('hours:my_totals')).data['extra_hours']
        assert after - before == 4.0
        assert leader.get(reverse('hours:review_pending')).data['results'] == []

    def test_archive_rejects_malformed_team(self, club_leader, auth_client):
        response = auth_client(club_leader).get(reverse('hours:review_archive'), {'team': 'not-a-uuid'})

        assert response.status_code == 400
        assert response.data == {'error': 'Unknown team.', 'code': 'validation_failed'}

    def test_archive_filters_by_team(self, club_leader, member, other_team_member, events_team, auth_client):
        hour_utils.submit_hour_request(member, 'a', 'aaaaaaaaaa')
        theirs = hour_utils.submit_hour_request(other_team_member, 'b', 'bbbbbbbbbb')
        hour_utils.review_hour_request(club_leader, theirs.pk, hour_utils.REJECT)

        response = auth_client(club_leader).get(reverse('hours:review_archive'), {'team': str(events_team.pk)})

        assert [row['id'] for row in response.data['results']] == [str(theirs.pk)]

    def test_member_has_no_review_queue(self, member, auth_client):
        response = auth_client(member).get(reverse('hours:review_pending'))

        assert response.status_code == 403
        assert response.data['code'] == 'scope_denied'

    def test_approve_without_hours(self, member, team_leader, auth_client):
        hour_request = hour_utils.submit_hour_request(member, 'Cleanup', 'Cleaned the hall')

        response = auth_client(team_leader).post(
            reverse('hours:review', args=[hour_request.pk]), {'decision': 'approve'}, format='json'
        )

        assert response.status_code == 400
        assert HourRequest.objects.get(pk=hour_request.pk).status == 'pending'

    def test_grant_outside_team(self, team_leader, other_team_member, auth_client):
        response = auth_client(team_leader).post(reverse('hours:grant'), {
            'member_id': str(other_team_member.pk),
            'task_description': 'Helped at the registration desk',
            'hours': '2.0',
        }, format='json')

        assert response.status_code == 403
        assert response.data['code'] == 'scope_denied'

    def test_grant_targets_are_team_members(self, team_leader, member, other_team_member, auth_client):
        response = auth_client(team_leader).get(reverse('hours:grant'))

        names = {row['full_name'] for row in response.data}
        assert names == {'Mona Member', 'Tariq Leader'}

    def test_totals(self, member, auth_client):
        response = auth_client(member).get(reverse('hours:my_totals'))
        assert response.data == {'event_hours': 0.0, 'extra_hours': 0.0, 'total_hours': 0.0}


class TestEventEndpoints:
    def test_check_in_code_only_for_leadership(self, member, club_leader, make_event, auth_client):
        event = make_event()
        url = reverse('events:event_detail', args=[event.pk])

        assert 'check_in_code' not in auth_client(member).get(url).data
        assert auth_client(club_leader).get(url).data['check_in_code'] == event.check_in_code

    def test_leadership_creates_events(self, member, club_leader, auth_client):
        start = timezone.now() + timedelta(days=3)
        payload = {
            'title': 'Hack night',
            'start_time': start.isoformat(),
            'end_time': (start + timedelta(hours=3)).isoformat(),
            'max_attendees': 30,
        }

        assert auth_client(member).post(reverse('events:event_list'), payload, format='json').status_code == 403

        response = auth_client(club_leader).post(reverse('events:event_list'), payload, format='json')
        assert response.status_code == 201
        assert len(response.data['check_in_code']) == 6

    def test_check_in_code_cannot_be_edited(self, club_leader, make_event, auth_client):
        event = make_event(check_in_code='123456')

        response = auth_client(club_leader).patch(
            reverse('events:event_detail', args=[event.pk]), {'title': 'Renamed', 'check_in_code': 'ZZZZZZ'},
            format='json'
        )

        assert response.status_code == 200
        assert response.data['title'] == 'Renamed'
        assert response.data['check_in_code'] == '123456'

    def test_end_before_start_is_rejected(self, club_leader, auth_client):
        start = timezone.now() + timedelta(days=3)
        response = auth_client(club_leader).post(reverse('events:event_list'), {
            'title': 'Backwards',
            'start_time': start.isoformat(),
            'end_time': (start - timedelta(hours=1)).isoformat(),
        }, format='json')

        assert response.status_code == 400

    def test_register_twice(self, member, make_event, auth_client):
        event = make_event()
        client = auth_client(member)
        url = reverse('events:event_register', args=[event.pk])

        assert client.post(url, {}, format='json').status_code == 201
        response = client.post(url, {}, format='json')
        assert response.status_code == 409
        assert 'already registered' in response.data['error']

    def test_organizer_gets_contact_link(self, member, make_event, auth_client):
        event = make_event(organizer_contact_link='https://chat.example/invite/abc')

        response = auth_client(member).post(
            reverse('events:event_register', args=[event.pk]), {'role': 'organizer'}, format='json'
        )

        assert response.data['organizer_contact_link'] == 'https://chat.example/invite/abc'

    def test_check_in_before_start_is_informational(self, member, make_event, auth_client):
        event = make_event(start=timezone.now() + timedelta(hours=2))
        client = auth_client(member)
        client.post(reverse('events:event_register', args=[event.pk]), {}, format='json')

        response = client.post(
            reverse('events:event_check_in', args=[event.pk]), {'code': event.check_in_code}, format='json'
        )

        assert response.status_code == 200
        assert response.data['outcome'] == 'not_open'

    def test_wrong_code(self, member, make_event, auth_client):
        event = make_event(start=timezone.now() - timedelta(minutes=10))
        client = auth_client(member)
        client.post(reverse('events:event_register', args=[event.pk]), {}, format='json')

        response = client.post(reverse('events:event_check_in', args=[event.pk]), {'code': 'nope'}, format='json')

        assert response.status_code == 400
        assert response.data['code'] == 'validation_failed'

    def test_unknown_event(self, member, auth_client):
        response = auth_client(member).get(
            reverse('events:event_detail', args=['00000000-0000-0000-0000-000000000000'])
        )

        assert response.status_code == 404
        assert response.data == {'error': 'Event not found', 'code': 'not_found'}

    def test_participants_export(self, club_leader, member, make_event, auth_client):
        event = make_event()
        auth_client(member).post(reverse('events:event_register', args=[event.pk]), {}, format='json')

        response = auth_client(club_leader).get(reverse('events:export_participants', args=[event.pk]))

        assert response.status_code == 200
        assert response['Content-Type'] == 'text/csv'
        assert b'Mona Member' in response.content


class TestContact:
    def test_anyone_can_write(self, api_client):
        response = api_client.post(reverse('contact:contact_create'), {
            'full_name': 'Visitor', 'email': 'v@example.com',
            'subject': 'Joining', 'message_body': 'How can I join the club?'
        }, format='json')

        assert response.status_code == 201
        assert ContactMessage.objects.get().is_read is False

    def test_leadership_reads_and_marks(self, member, club_leader, auth_client):
        message = ContactMessage.objects.create(
            full_name='Visitor', email='v@example.com', subject='Hi', message_body='Hello there, club!'
        )

        assert auth_client(member).get(reverse('contact:message_list')).status_code == 403

        client = auth_client(club_leader)
        assert client.get(reverse('contact:message_list')).data['count'] == 1
        assert client.post(reverse('contact:mark_read', args=[message.pk])).status_code == 200

        message.refresh_from_db()
        assert message.is_read


class TestTeams:
    def test_join_and_leave(self, make_user, media_team, auth_client):
        user = make_user()
        client = auth_client(user)

        assert client.post(reverse('teams:join', args=[media_team.pk])).status_code == 201
        assert client.post(reverse('teams:join', args=[media_team.pk])).status_code == 409
        assert client.post(reverse('teams:leave')).status_code == 200

    def test_promote_to_team_leader(self, member, club_leader, auth_client):
        client = auth_client(club_leader)

        response = client.patch(
            reverse('teams:set_role', args=[member.pk]), {'role_in_team': 'leader'}, format='json'
        )

        assert response.status_code == 200
        assert auth_client(member).get(reverse('hours:review_pending')).status_code == 200


def test_health(api_client):
    assert api_client.get('/health/').status_code == 200
