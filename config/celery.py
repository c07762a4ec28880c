"""
Celery configuration for Student Club Portal
Background task processing
"""
import os
from celery import Celery

# Set default Django settings module
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

app = Celery('student_club_portal')

# Using a string here means the worker doesn't have to serialize
# the configuration object to child processes.
app.config_from_object('django.conf:settings', namespace='CELERY')

# Load task modules from all registered Django apps.
app.autodiscover_tasks()

# Celery beat schedule for periodic tasks
app.conf.beat_schedule = {
    'send-event-reminders': {
        'task': 'apps.events.tasks.send_event_reminders',
        'schedule': 3600.0,  # Every hour
    },
}

app.conf.timezone = 'UTC'
