"""
Contact models for Student Club Portal
"""
from django.db import models
import uuid


class ContactMessage(models.Model):
    """Message sent through the public contact form"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    full_name = models.CharField(max_length=150)
    email = models.EmailField()
    phone = models.CharField(max_length=20, blank=True)
    title = models.CharField(max_length=100, blank=True, help_text="Student, staff, visitor...")
    subject = models.CharField(max_length=200)
    message_body = models.TextField()
    is_read = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'contact_messages'
        verbose_name = 'Contact Message'
        verbose_name_plural = 'Contact Messages'
        ordering = ['is_read', '-created_at']

    def __str__(self):
        return f"{self.subject} from {self.full_name}"
