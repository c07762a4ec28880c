"""
Design app configuration
"""
from django.apps import AppConfig


class DesignConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.design'
    verbose_name = 'Design Requests'
