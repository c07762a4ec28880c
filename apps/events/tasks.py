"""
Celery tasks for events app
Background tasks for event notifications
"""
import logging
from datetime import timedelta

from celery import shared_task
from django.utils import timezone

from apps.common.utils import send_email_notification
from .models import Event, RegistrationStatus

logger = logging.getLogger(__name__)

REMINDER_WINDOWS = (
    (timedelta(hours=23), timedelta(hours=24), 'Tomorrow'),
    (timedelta(0), timedelta(hours=1), 'Starting Soon'),
)


@shared_task
def send_event_reminders():
    """Send event reminders to registered users.

    Runs hourly; each window is one hour wide so a registration is reminded
    once a day before and once an hour before the event.
    """
    now = timezone.now()
    reminder_count = 0

    for window_start, window_end, label in REMINDER_WINDOWS:
        events = Event.objects.filter(
            start_time__gt=now + window_start,
            start_time__lte=now + window_end,
        ).prefetch_related('registrations__user__profile')

        for event in events:
            for registration in event.registrations.all():
                if registration.status != RegistrationStatus.REGISTERED:
                    continue

                profile = getattr(registration.user, 'profile', None)
                name = profile.full_name if profile else registration.user.email
                message = (
                    f'Hi {name},\n\n'
                    f'This is a reminder that you are registered for:\n\n'
                    f'{event.title}\n'
                    f'Date: {timezone.localtime(event.start_time).strftime("%B %d, %Y at %I:%M %p")}\n'
                    f'Location: {event.location}\n\n'
                    f'Check-in opens when the event starts.\n'
                )
                if send_email_notification(registration.user.email, f'Event Reminder: {event.title} - {label}', message):
                    reminder_count += 1

    logger.info("Sent %s event reminders", reminder_count)
    return f"Sent {reminder_count} event reminders"
