"""
Common utilities for Student Club Portal
"""
import logging
import secrets

from django.core.mail import send_mail
from django.conf import settings

logger = logging.getLogger(__name__)


def generate_check_in_code():
    """Six-digit numeric code, never starting with zero"""
    return str(100000 + secrets.randbelow(900000))


def send_email_notification(recipient_email, subject, message, html_message=None):
    """Send email notification"""
    try:
        send_mail(
            subject=subject,
            message=message,
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[recipient_email],
            html_message=html_message,
            fail_silently=False
        )
        return True
    except Exception as e:
        logger.warning("Failed to send email to %s: %s", recipient_email, e)
        return False


def get_client_ip(request):
    """Get client IP address from request"""
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        ip = x_forwarded_for.split(',')[0]
    else:
        ip = request.META.get('REMOTE_ADDR')
    return ip
