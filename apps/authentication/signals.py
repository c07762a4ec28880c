"""
Signal handlers for authentication app
"""
import logging

from django.conf import settings
from django.db import transaction
from django.db.models.signals import post_save
from django.dispatch import receiver

from apps.common.utils import send_email_notification
from .models import Profile

logger = logging.getLogger(__name__)


def _send_welcome_email(email, full_name, user_id):
    message = (
        f'Welcome {full_name}!\n\n'
        f'Your club profile is ready. Browse upcoming events at {settings.FRONTEND_URL}/events\n\n'
        f'Best regards,\nThe club team'
    )
    if send_email_notification(email, 'Welcome to the club', message):
        logger.info("Welcome e-mail sent to %s", user_id)


@receiver(post_save, sender=Profile)
def send_welcome_notification(sender, instance, created, **kwargs):
    """Welcome e-mail once the profile row is committed"""
    if not created:
        return

    email, full_name, user_id = instance.user.email, instance.full_name, instance.user_id
    transaction.on_commit(lambda: _send_welcome_email(email, full_name, user_id))
