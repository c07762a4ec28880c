"""
Django admin configuration for events app
"""
from django.contrib import admin
from django.db.models import Count

from .models import Event, EventRegistration, EventReport


class EventRegistrationInline(admin.TabularInline):
    """Inline for event registrations"""
    model = EventRegistration
    extra = 0
    readonly_fields = ['created_at', 'checked_in_at']
    fields = ['user', 'role', 'status', 'checked_in_at', 'created_at']
    raw_id_fields = ['user']

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('user')


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    """Event admin"""

    list_display = ['title', 'category', 'start_time', 'end_time', 'max_attendees', 'registrations_display']
    list_filter = ['category', 'start_time']
    search_fields = ['title', 'description', 'location']
    readonly_fields = ['id', 'check_in_code', 'created_at', 'updated_at']
    date_hierarchy = 'start_time'
    inlines = [EventRegistrationInline]

    fieldsets = (
        (None, {
            'fields': ('title', 'description', 'category', 'image_url')
        }),
        ('Schedule', {
            'fields': ('start_time', 'end_time', 'location')
        }),
        ('Registration', {
            'fields': ('max_attendees', 'check_in_code', 'organizer_contact_link')
        }),
        ('Timestamps', {
            'fields': ('created_by', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(num_registrations=Count('registrations'))

    def registrations_display(self, obj):
        return obj.num_registrations
    registrations_display.short_description = 'Registrations'


@admin.register(EventRegistration)
class EventRegistrationAdmin(admin.ModelAdmin):
    list_display = ['user', 'event', 'role', 'status', 'checked_in_at', 'created_at']
    list_filter = ['role', 'status']
    search_fields = ['user__email', 'user__profile__full_name', 'event__title']
    raw_id_fields = ['user', 'event']


@admin.register(EventReport)
class EventReportAdmin(admin.ModelAdmin):
    list_display = ['event', 'uploaded_by', 'created_at']
    search_fields = ['event__title', 'notes']
    raw_id_fields = ['event', 'uploaded_by']
