"""
Design request models for Student Club Portal
Design tickets raised by leaders and delivered by the design team
"""
from django.conf import settings
from django.db import models

from apps.common.models import TimeStampedModel


class DesignStatus(models.TextChoices):
    NEW = 'new', 'New'
    IN_PROGRESS = 'in_progress', 'In Progress'
    AWAITING_REVIEW = 'awaiting_review', 'Awaiting Review'
    COMPLETED = 'completed', 'Completed'
    REJECTED = 'rejected', 'Rejected'


class DesignRequest(TimeStampedModel):
    """A design ticket; see apps.design.utils for its transitions"""

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='design_requests')

    title = models.CharField(max_length=200)
    design_type = models.CharField(max_length=100)
    description = models.TextField()
    deadline = models.DateField(null=True, blank=True)

    status = models.CharField(max_length=20, choices=DesignStatus.choices, default=DesignStatus.NEW)
    assigned_to = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='assigned_design_requests'
    )
    design_url = models.URLField(blank=True)
    feedback_notes = models.TextField(blank=True)

    class Meta:
        db_table = 'design_requests'
        verbose_name = 'Design Request'
        verbose_name_plural = 'Design Requests'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status', 'created_at']),
            models.Index(fields=['assigned_to', 'status']),
        ]

    def __str__(self):
        return f"{self.title} ({self.status})"
