"""
Common permissions for Student Club Portal
"""
import logging

from rest_framework import permissions

from apps.authentication.models import Profile
from apps.authentication.scopes import PermissionGroup, get_user_scope

logger = logging.getLogger(__name__)


def request_scope(request):
    """Resolve the caller's scope once per request"""
    scope = getattr(request, '_club_scope', None)
    if scope is None:
        scope = get_user_scope(request.user)
        request._club_scope = scope
    return scope


class HasProfile(permissions.BasePermission):
    """
    Permission to check that the user completed their club profile
    """
    message = 'Complete your profile first.'

    def has_permission(self, request, view):
        return bool(
            request.user and request.user.is_authenticated
            and Profile.objects.filter(user=request.user).exists()
        )


class ScopePermission(permissions.BasePermission):
    group = PermissionGroup.GENERAL
    code = 'scope_denied'

    def has_permission(self, request, view):
        if not (request.user and request.user.is_authenticated):
            return False
        allowed = request_scope(request).has_group(self.group)
        if not allowed:
            logger.warning(
                "Denied %s %s to %s: requires %s",
                request.method, request.path, request.user.pk, self.group.value
            )
        return allowed


class IsTeamLeadership(ScopePermission):
    """
    Team leaders and club leadership
    """
    group = PermissionGroup.TEAM_LEADERSHIP
    message = 'Only team or club leadership can perform this action.'


class IsClubLeadership(ScopePermission):
    """
    Club leader, deputy or supervisor
    """
    group = PermissionGroup.CLUB_LEADERSHIP
    message = 'Only club leadership can perform this action.'


class IsClubLeadershipOrReadOnly(IsClubLeadership):
    """
    Reads for everyone, writes for club leadership
    """

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        return super().has_permission(request, view)
