"""
Django admin configuration for design app
"""
from django.contrib import admin

from apps.common.admin import BaseModelAdmin
from .models import DesignRequest


@admin.register(DesignRequest)
class DesignRequestAdmin(BaseModelAdmin):
    list_display = ['title', 'design_type', 'user', 'status', 'assigned_to', 'deadline', 'created_at']
    list_filter = ['status', 'design_type']
    search_fields = ['title', 'description', 'user__email']
    raw_id_fields = ['user', 'assigned_to']
