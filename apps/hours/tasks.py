"""
Celery tasks for hours app
Review notifications for hour requests
"""
import logging

from celery import shared_task
from django.conf import settings

from apps.common.models import ReviewStatus
from apps.common.utils import send_email_notification
from .models import HourRequest

logger = logging.getLogger(__name__)


@shared_task
def notify_hour_request_reviewed(request_id):
    """E-mail the requester the outcome of their hour request"""
    hour_request = HourRequest.objects.select_related('user', 'user__profile').filter(pk=request_id).first()
    if hour_request is None:
        logger.warning("Hour request %s vanished before notification", request_id)
        return "Hour request not found"

    user = hour_request.user
    profile = getattr(user, 'profile', None)
    name = profile.full_name if profile else user.email

    if hour_request.status == ReviewStatus.APPROVED:
        outcome = f'approved with {hour_request.awarded_hours} hours'
    else:
        outcome = 'rejected'

    message = (
        f'Hi {name},\n\n'
        f'Your hour request "{hour_request.activity_title}" was {outcome}.\n'
    )
    if hour_request.notes:
        message += f'\nReviewer notes: {hour_request.notes}\n'
    message += f'\nSee your history at {settings.FRONTEND_URL}/profile\n'

    sent = send_email_notification(
        user.email,
        subject=f'Hour request {hour_request.get_status_display().lower()}',
        message=message,
    )
    return f"Notification {'sent' if sent else 'failed'} for {request_id}"
