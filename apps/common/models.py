"""
Common models for Student Club Portal
Shared models and utilities across all apps
"""
from django.db import models
import uuid


class TimeStampedModel(models.Model):
    """Abstract model with timestamps"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class ReviewStatus(models.TextChoices):
    """Status of a reviewed request"""
    PENDING = 'pending', 'Pending'
    APPROVED = 'approved', 'Approved'
    REJECTED = 'rejected', 'Rejected'
