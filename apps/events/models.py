"""
Event models for Student Club Portal
Events, registrations with check-in, and post-event reports
"""
from datetime import timedelta

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
import uuid

from apps.common.utils import generate_check_in_code


class Event(models.Model):
    """Club event"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    location = models.CharField(max_length=300, blank=True)
    category = models.CharField(max_length=100, blank=True)
    image_url = models.URLField(blank=True)

    # Date and Time
    start_time = models.DateTimeField()
    end_time = models.DateTimeField()

    # Capacity and check-in
    max_attendees = models.IntegerField(null=True, blank=True, validators=[MinValueValidator(1)])
    check_in_code = models.CharField(max_length=6, default=generate_check_in_code)
    organizer_contact_link = models.URLField(blank=True, help_text="Invitation link shown to organizers")

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='created_events'
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'events'
        verbose_name = 'Event'
        verbose_name_plural = 'Events'
        ordering = ['-start_time']
        indexes = [
            models.Index(fields=['start_time', 'end_time']),
            models.Index(fields=['category']),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_time__gt=models.F('start_time')),
                name='event_ends_after_start',
            ),
        ]

    def __str__(self):
        return self.title

    def clean(self):
        if self.start_time and self.end_time and self.end_time <= self.start_time:
            raise ValidationError({'end_time': 'End time must be after start time.'})

    @property
    def check_in_deadline(self):
        return self.end_time + timedelta(minutes=settings.CHECK_IN_GRACE_MINUTES)

    @property
    def duration_hours(self):
        """Get event duration in hours"""
        duration = self.end_time - self.start_time
        return duration.total_seconds() / 3600

    @property
    def is_upcoming(self):
        return self.start_time > timezone.now()

    @property
    def is_past(self):
        return self.end_time < timezone.now()


class RegistrationRole(models.TextChoices):
    ATTENDEE = 'attendee', 'Attendee'
    ORGANIZER = 'organizer', 'Organizer'


class RegistrationStatus(models.TextChoices):
    REGISTERED = 'registered', 'Registered'
    ATTENDED = 'attended', 'Attended'


class EventRegistration(models.Model):
    """Event registration; moves to attended at check-in"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='event_registrations')
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name='registrations')

    role = models.CharField(max_length=20, choices=RegistrationRole.choices, default=RegistrationRole.ATTENDEE)
    status = models.CharField(max_length=20, choices=RegistrationStatus.choices, default=RegistrationStatus.REGISTERED)
    checked_in_at = models.DateTimeField(null=True, blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'event_registrations'
        verbose_name = 'Event Registration'
        verbose_name_plural = 'Event Registrations'
        constraints = [
            models.UniqueConstraint(fields=['user', 'event'], name='one_registration_per_user_event'),
        ]
        indexes = [
            models.Index(fields=['event', 'status']),
            models.Index(fields=['user', 'status']),
        ]

    def __str__(self):
        return f"{self.user} - {self.event.title}"


class EventReport(models.Model):
    """Post-event report uploaded by club leadership"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.OneToOneField(Event, on_delete=models.CASCADE, related_name='report')
    notes = models.TextField()
    uploaded_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='event_reports'
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'event_reports'
        verbose_name = 'Event Report'
        verbose_name_plural = 'Event Reports'

    def __str__(self):
        return f"Report for {self.event.title}"
