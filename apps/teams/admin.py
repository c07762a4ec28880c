"""
Django admin configuration for teams app
"""
from django.contrib import admin

from .models import Team, TeamMembership


class TeamMembershipInline(admin.TabularInline):
    """Inline for team memberships"""
    model = TeamMembership
    extra = 0
    fields = ['user', 'role_in_team', 'joined_at']
    readonly_fields = ['joined_at']
    raw_id_fields = ['user']


@admin.register(Team)
class TeamAdmin(admin.ModelAdmin):
    list_display = ['name', 'leader_title', 'handles_design_requests', 'member_count', 'created_at']
    list_filter = ['handles_design_requests']
    search_fields = ['name', 'description']
    readonly_fields = ['id', 'created_at', 'updated_at']
    inlines = [TeamMembershipInline]


@admin.register(TeamMembership)
class TeamMembershipAdmin(admin.ModelAdmin):
    list_display = ['user', 'team', 'role_in_team', 'joined_at']
    list_filter = ['team', 'role_in_team']
    search_fields = ['user__email', 'user__profile__full_name', 'team__name']
    raw_id_fields = ['user']
