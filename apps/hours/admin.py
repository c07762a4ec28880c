"""
Django admin configuration for hours app
"""
from django.contrib import admin

from apps.common.admin import BaseModelAdmin
from .models import HourRequest


@admin.register(HourRequest)
class HourRequestAdmin(BaseModelAdmin):
    """Hour request admin"""

    list_display = ['activity_title', 'user', 'team', 'status', 'awarded_hours', 'reviewed_by', 'created_at']
    list_filter = ['status', 'team', 'created_at']
    search_fields = ['activity_title', 'task_description', 'user__email', 'user__profile__full_name']
    raw_id_fields = ['user', 'reviewed_by']

    fieldsets = (
        (None, {
            'fields': ('user', 'team', 'activity_title', 'task_description', 'task_type', 'image_url')
        }),
        ('Review', {
            'fields': ('status', 'awarded_hours', 'reviewed_by', 'reviewed_at', 'notes')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
