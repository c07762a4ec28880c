"""
Django admin configuration for gallery app
"""
from django.contrib import admin

from .models import GalleryImage


@admin.register(GalleryImage)
class GalleryImageAdmin(admin.ModelAdmin):
    list_display = ['alt_text', 'category', 'uploaded_by', 'created_at']
    list_filter = ['category']
    search_fields = ['alt_text', 'image_url']
    readonly_fields = ['id', 'created_at']
