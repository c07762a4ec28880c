"""
Gallery models for Student Club Portal
"""
from django.conf import settings
from django.db import models
import uuid


class GalleryCategory(models.TextChoices):
    WORKSHOPS = 'workshops', 'Workshops'
    SEMINARS = 'seminars', 'Seminars'
    EXHIBITIONS = 'exhibitions', 'Exhibitions'
    VISITS = 'visits', 'Visits'
    TRAINING = 'training', 'Training Courses'
    VOLUNTEERING = 'volunteering', 'Volunteering'
    CELEBRATIONS = 'celebrations', 'Celebrations'
    INITIATIVES = 'initiatives', 'Initiatives'


class GalleryImage(models.Model):
    """Photo shown in the public gallery"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    image_url = models.URLField(max_length=500)
    alt_text = models.CharField(max_length=200, blank=True)
    category = models.CharField(max_length=20, choices=GalleryCategory.choices, blank=True)
    uploaded_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='gallery_images'
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'gallery_images'
        verbose_name = 'Gallery Image'
        verbose_name_plural = 'Gallery Images'
        ordering = ['-created_at']

    def __str__(self):
        return self.alt_text or self.image_url
