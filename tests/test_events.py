import io
from datetime import timedelta

import pytest
from django.utils import timezone

from apps.common.exceptions import Conflict, NotFound, ValidationFailed
from apps.events import utils
from apps.events.models import Event, EventRegistration, RegistrationRole, RegistrationStatus
from apps.events.utils import CheckInOutcome, CheckInWindow


@pytest.mark.django_db
class TestRegistration:
    def test_register_then_duplicate_conflicts(self, member, make_event):
        event = make_event()

        registration = utils.register_for_event(member, event)
        assert registration.status == RegistrationStatus.REGISTERED
        assert registration.role == RegistrationRole.ATTENDEE

        with pytest.raises(Conflict, match='already registered'):
            utils.register_for_event(member, event)

        assert EventRegistration.objects.filter(user=member, event=event).count() == 1

    def test_capacity_guard(self, make_user, make_event):
        event = make_event(max_attendees=2)
        first, second, third = make_user(), make_user(), make_user()

        utils.register_for_event(first, event)
        utils.register_for_event(second, event, RegistrationRole.ORGANIZER)

        with pytest.raises(Conflict, match='No seats'):
            utils.register_for_event(third, event)

        assert event.registrations.count() == 2

    def test_unlimited_when_no_capacity(self, make_user, make_event):
        event = make_event(max_attendees=None)
        for _ in range(5):
            utils.register_for_event(make_user(), event)

        assert utils.get_event(event.pk).registered_attendees == 5

    def test_registration_status(self, member, make_event):
        event = make_event()
        assert utils.registration_status(member, event) == 'not_registered'

        utils.register_for_event(member, event)
        assert utils.registration_status(member, event) == RegistrationStatus.REGISTERED

    def test_unknown_event(self):
        with pytest.raises(NotFound, match='Event not found'):
            utils.get_event('00000000-0000-0000-0000-000000000000')


@pytest.mark.django_db
class TestCheckInWindow:
    def test_window_boundaries(self, make_event):
        start = timezone.now()
        event = make_event(start=start, hours=2)
        end = start + timedelta(hours=2)

        assert utils.check_in_window(event, start - timedelta(seconds=1)) == CheckInWindow.NOT_OPEN
        assert utils.check_in_window(event, start) == CheckInWindow.OPEN
        assert utils.check_in_window(event, end + timedelta(minutes=60)) == CheckInWindow.OPEN
        assert utils.check_in_window(event, end + timedelta(minutes=61)) == CheckInWindow.CLOSED


@pytest.mark.django_db
class TestCheckIn:
    @pytest.fixture
    def running_event(self, make_event):
        return make_event(start=timezone.now() - timedelta(minutes=30), check_in_code='AB12CD')

    def test_successful_check_in_is_case_insensitive(self, member, running_event):
        utils.register_for_event(member, running_event)

        outcome = utils.check_in(member, running_event, 'ab12cd')

        assert outcome == CheckInOutcome.CHECKED_IN
        registration = EventRegistration.objects.get(user=member, event=running_event)
        assert registration.status == RegistrationStatus.ATTENDED
        assert registration.checked_in_at is not None

    def test_second_check_in_is_informational(self, member, running_event):
        utils.register_for_event(member, running_event)
        utils.check_in(member, running_event, 'AB12CD')

        assert utils.check_in(member, running_event, 'AB12CD') == CheckInOutcome.ALREADY_ATTENDED

    @pytest.mark.parametrize('code', ['000000', '', '  '])
    def test_wrong_code_leaves_registration_unchanged(self, member, running_event, code):
        utils.register_for_event(member, running_event)

        with pytest.raises(ValidationFailed):
            utils.check_in(member, running_event, code)

        assert utils.registration_status(member, running_event) == RegistrationStatus.REGISTERED

    def test_not_registered(self, member, running_event):
        with pytest.raises(NotFound):
            utils.check_in(member, running_event, 'AB12CD')

    def test_before_start_ignores_code(self, member, make_event):
        event = make_event(start=timezone.now() + timedelta(hours=1), check_in_code='123456')
        utils.register_for_event(member, event)

        assert utils.check_in(member, event, '123456') == CheckInOutcome.NOT_OPEN
        assert utils.check_in(member, event, 'wrong') == CheckInOutcome.NOT_OPEN
        assert utils.registration_status(member, event) == RegistrationStatus.REGISTERED

    def test_after_deadline_is_closed(self, member, make_event):
        event = make_event(start=timezone.now() - timedelta(hours=4), hours=2, check_in_code='123456')
        utils.register_for_event(member, event)

        assert utils.check_in(member, event, '123456') == CheckInOutcome.CLOSED
        assert utils.registration_status(member, event) == RegistrationStatus.REGISTERED


@pytest.mark.django_db
class TestListingAndReports:
    def test_filter_tabs(self, make_event):
        now = timezone.now()
        upcoming = make_event(start=now + timedelta(days=2), category='Workshops')
        past = make_event(start=now - timedelta(days=2), category='Seminars')
        queryset = utils.with_attendee_count(Event.objects.all())

        assert list(utils.filter_events(queryset, 'upcoming', now=now)) == [upcoming]
        assert list(utils.filter_events(queryset, 'past', now=now)) == [past]
        assert set(utils.filter_events(queryset, 'all', now=now)) == {upcoming, past}
        assert list(utils.filter_events(queryset, 'all', category='seminars', now=now)) == [past]

    def test_participants_csv(self, member, make_user, make_event):
        event = make_event(start=timezone.now() - timedelta(minutes=5), check_in_code='654321')
        absent = make_user(full_name='Absent Ahmad')
        utils.register_for_event(member, event)
        utils.register_for_event(absent, event, RegistrationRole.ORGANIZER)
        utils.check_in(member, event, '654321')

        stream = utils.write_participants_csv(event, io.StringIO())
        lines = stream.getvalue().strip().splitlines()

        assert lines[0] == 'Full Name,Student ID,Email,Phone,Role,Status'
        assert any(line.startswith('Mona Member') and line.endswith('Attended') for line in lines)
        assert any(line.startswith('Absent Ahmad') and 'Organizer' in line and line.endswith('Absent') for line in lines)

    def test_qr_code_is_png(self, make_event):
        png = utils.render_check_in_qr(make_event())
        assert png.startswith(b'\x89PNG')

    def test_generated_code_is_six_digits(self, make_event):
        event = make_event()
        assert len(event.check_in_code) == 6
        assert event.check_in_code.isdigit()
