"""
Django admin configuration for authentication app
"""
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import ClubApplication, Profile, User


class ProfileInline(admin.StackedInline):
    model = Profile
    can_delete = False
    fields = ['full_name', 'student_id', 'college', 'major', 'phone_number', 'club_role', 'committee']


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Custom User admin configuration"""

    inlines = [ProfileInline]
    list_display = ['email', 'is_active', 'is_staff', 'date_joined']
    list_filter = ['is_active', 'is_staff', 'date_joined']
    search_fields = ['email', 'profile__full_name', 'profile__student_id']
    ordering = ['email']
    readonly_fields = ['id', 'date_joined', 'last_login']

    fieldsets = (
        (None, {
            'fields': ('email', 'password')
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
            'classes': ('collapse',)
        }),
        ('Important dates', {
            'fields': ('last_login', 'date_joined'),
            'classes': ('collapse',)
        }),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'password1', 'password2'),
        }),
    )


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    """Club profile admin; club roles are assigned here"""

    list_display = ['full_name', 'user', 'student_id', 'club_role', 'committee', 'created_at']
    list_filter = ['club_role', 'committee']
    search_fields = ['full_name', 'student_id', 'user__email']
    list_editable = ['club_role']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(ClubApplication)
class ClubApplicationAdmin(admin.ModelAdmin):
    list_display = ['user', 'preferred_committee', 'created_at', 'updated_at']
    list_filter = ['preferred_committee']
    search_fields = ['user__email', 'user__profile__full_name', 'skills']
    readonly_fields = ['id', 'created_at', 'updated_at']
