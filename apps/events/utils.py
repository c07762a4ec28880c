"""
Event utilities for Student Club Portal
Registration, check-in state machine and participant reports
"""
import csv
import logging
from enum import Enum
from io import BytesIO

import qrcode
from django.db import IntegrityError, transaction
from django.db.models import Count
from django.utils import timezone

from apps.common.exceptions import Conflict, NotFound, ValidationFailed
from .models import Event, EventRegistration, RegistrationRole, RegistrationStatus

logger = logging.getLogger(__name__)


class CheckInWindow(str, Enum):
    NOT_OPEN = 'not_open'
    OPEN = 'open'
    CLOSED = 'closed'


class CheckInOutcome(str, Enum):
    CHECKED_IN = 'checked_in'
    ALREADY_ATTENDED = 'already_attended'
    NOT_OPEN = 'not_open'
    CLOSED = 'closed'


OUTCOME_MESSAGES = {
    CheckInOutcome.CHECKED_IN: 'Your attendance has been confirmed.',
    CheckInOutcome.ALREADY_ATTENDED: 'Your attendance was already confirmed.',
    CheckInOutcome.NOT_OPEN: 'Check-in has not opened yet.',
    CheckInOutcome.CLOSED: 'The check-in window has closed.',
}


def with_attendee_count(queryset):
    """Annotate events with the live number of registrations"""
    return queryset.annotate(registered_attendees=Count('registrations', distinct=True))


def get_event(event_id, annotate=True):
    queryset = Event.objects.all()
    if annotate:
        queryset = with_attendee_count(queryset)
    try:
        return queryset.get(pk=event_id)
    except (Event.DoesNotExist, ValueError):
        raise NotFound('Event not found')


def filter_events(queryset, time_filter='upcoming', category=None, now=None):
    """Event list tabs: upcoming, past or all, with optional category"""
    now = now or timezone.now()
    if time_filter == 'upcoming':
        queryset = queryset.filter(end_time__gte=now).order_by('start_time')
    elif time_filter == 'past':
        queryset = queryset.filter(end_time__lt=now).order_by('-start_time')

    if category:
        queryset = queryset.filter(category__iexact=category)

    return queryset


def registration_status(user, event):
    """not_registered, registered or attended"""
    registration = EventRegistration.objects.filter(user=user, event=event).only('status').first()
    if registration is None:
        return 'not_registered'
    return registration.status


def register_for_event(user, event, role=RegistrationRole.ATTENDEE):
    """Register ``user`` for ``event``.

    The capacity check and the insert run under a lock on the event row, and
    the unique (user, event) constraint catches any duplicate that slips past
    the existence check.
    """
    role = RegistrationRole(role)

    try:
        with transaction.atomic():
            locked = Event.objects.select_for_update().get(pk=event.pk)

            if EventRegistration.objects.filter(user=user, event=locked).exists():
                raise Conflict('You are already registered for this event.')

            if locked.max_attendees is not None:
                taken = EventRegistration.objects.filter(event=locked).count()
                if taken >= locked.max_attendees:
                    raise Conflict('No seats available.')

            registration = EventRegistration.objects.create(
                user=user,
                event=locked,
                role=role,
                status=RegistrationStatus.REGISTERED,
            )
    except IntegrityError:
        raise Conflict('You are already registered for this event.')

    logger.info("User %s registered for event %s as %s", user.pk, event.pk, role.value)
    return registration


def check_in_window(event, now=None):
    """Window is [start_time, end_time + grace]"""
    now = now or timezone.now()
    if now < event.start_time:
        return CheckInWindow.NOT_OPEN
    if now > event.check_in_deadline:
        return CheckInWindow.CLOSED
    return CheckInWindow.OPEN


def check_in(user, event, code, now=None):
    """Move the user's registration from registered to attended.

    Outside the window the outcome is informational and the code is not
    looked at. A wrong code raises ValidationFailed and changes nothing.
    """
    now = now or timezone.now()

    window = check_in_window(event, now)
    if window == CheckInWindow.NOT_OPEN:
        return CheckInOutcome.NOT_OPEN
    if window == CheckInWindow.CLOSED:
        return CheckInOutcome.CLOSED

    registration = EventRegistration.objects.filter(user=user, event=event).first()
    if registration is None:
        raise NotFound('You are not registered for this event.')
    if registration.status == RegistrationStatus.ATTENDED:
        return CheckInOutcome.ALREADY_ATTENDED

    submitted = (code or '').strip().lower()
    if not submitted or submitted != (event.check_in_code or '').lower():
        raise ValidationFailed('The check-in code is incorrect.')

    updated = EventRegistration.objects.filter(
        pk=registration.pk,
        status=RegistrationStatus.REGISTERED,
    ).update(status=RegistrationStatus.ATTENDED, checked_in_at=now, updated_at=now)

    if not updated:
        return CheckInOutcome.ALREADY_ATTENDED

    logger.info("User %s checked in to event %s", user.pk, event.pk)
    return CheckInOutcome.CHECKED_IN


def event_participants(event):
    """Participants of an event with their attendance status"""
    return (
        EventRegistration.objects
        .filter(event=event)
        .select_related('user', 'user__profile')
        .order_by('created_at')
    )


def participant_rows(event):
    for registration in event_participants(event):
        profile = getattr(registration.user, 'profile', None)
        yield [
            profile.full_name if profile else '',
            profile.student_id if profile else '',
            registration.user.email,
            profile.phone_number if profile else '',
            registration.get_role_display(),
            'Attended' if registration.status == RegistrationStatus.ATTENDED else 'Absent',
        ]


def write_participants_csv(event, stream):
    writer = csv.writer(stream)
    writer.writerow(['Full Name', 'Student ID', 'Email', 'Phone', 'Role', 'Status'])
    for row in participant_rows(event):
        writer.writerow(row)
    return stream


def render_check_in_qr(event):
    """PNG bytes of a QR code carrying the event id and check-in code"""
    qr = qrcode.QRCode(version=1, box_size=10, border=4)
    qr.add_data(f"event:{event.id}:{event.check_in_code}")
    qr.make(fit=True)

    image = qr.make_image(fill_color="black", back_color="white")
    buffer = BytesIO()
    image.save(buffer, format='PNG')
    return buffer.getvalue()


def user_registrations(user, when=None, now=None):
    """A user's registrations, optionally only upcoming or past events"""
    now = now or timezone.now()
    queryset = EventRegistration.objects.filter(user=user).select_related('event')
    if when == 'upcoming':
        queryset = queryset.filter(event__end_time__gte=now).order_by('event__start_time')
    elif when == 'past':
        queryset = queryset.filter(event__end_time__lt=now).order_by('-event__start_time')
    else:
        queryset = queryset.order_by('-event__start_time')
    return queryset
