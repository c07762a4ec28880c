"""
Volunteer hour models for Student Club Portal
Extra-hour requests and their one-shot review
"""
from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q

from apps.common.models import ReviewStatus, TimeStampedModel


class HourRequest(TimeStampedModel):
    """A member's claim for volunteer-hour credit.

    ``awarded_hours`` is set if and only if the request is approved. Once a
    request leaves pending it is archival.
    """

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='hour_requests')
    team = models.ForeignKey(
        'teams.Team',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='hour_requests'
    )

    activity_title = models.CharField(max_length=200)
    task_description = models.TextField()
    task_type = models.CharField(max_length=100, blank=True)
    image_url = models.URLField(blank=True, help_text="Proof of the task")

    status = models.CharField(max_length=20, choices=ReviewStatus.choices, default=ReviewStatus.PENDING)
    awarded_hours = models.DecimalField(max_digits=5, decimal_places=1, null=True, blank=True)

    reviewed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='reviewed_hour_requests'
    )
    reviewed_at = models.DateTimeField(null=True, blank=True)
    notes = models.TextField(blank=True)

    class Meta:
        db_table = 'extra_hours_requests'
        verbose_name = 'Hour Request'
        verbose_name_plural = 'Hour Requests'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status', 'created_at']),
            models.Index(fields=['user', 'status']),
        ]
        constraints = [
            models.CheckConstraint(
                condition=(
                    Q(status=ReviewStatus.APPROVED, awarded_hours__isnull=False, awarded_hours__gt=0)
                    | (~Q(status=ReviewStatus.APPROVED) & Q(awarded_hours__isnull=True))
                ),
                name='awarded_hours_only_when_approved',
            ),
        ]

    def __str__(self):
        return f"{self.activity_title} ({self.status})"

    def clean(self):
        if self.status == ReviewStatus.APPROVED:
            if self.awarded_hours is None or self.awarded_hours <= 0:
                raise ValidationError({'awarded_hours': 'Approved requests need a positive number of hours.'})
        elif self.awarded_hours is not None:
            raise ValidationError({'awarded_hours': 'Only approved requests carry awarded hours.'})

    @property
    def is_archived(self):
        return self.status != ReviewStatus.PENDING
