"""
Authorization scopes for Student Club Portal

A user's scope is derived from their club role and their (single) team
membership. It is recomputed from the database for every request and never
cached, so a role change takes effect on the next call.
"""
from dataclasses import dataclass
from enum import Enum

from apps.teams.models import TeamMembership, TeamRole
from .models import ClubRole, Profile


class PermissionGroup(str, Enum):
    GENERAL = 'general'
    TEAM_LEADERSHIP = 'team_leadership'
    CLUB_LEADERSHIP = 'club_leadership'


class ReviewVisibility(str, Enum):
    ALL = 'all'
    TEAM = 'team'
    NONE = 'none'


CLUB_LEADERSHIP_ROLES = frozenset({
    ClubRole.CLUB_LEADER.value,
    ClubRole.CLUB_DEPUTY.value,
    ClubRole.CLUB_SUPERVISOR.value,
})


@dataclass(frozen=True)
class Scope:
    club_role: str
    team_id: object = None
    role_in_team: str = None

    @property
    def is_club_leadership(self):
        return self.club_role in CLUB_LEADERSHIP_ROLES

    @property
    def is_team_leader(self):
        return self.team_id is not None and self.role_in_team == TeamRole.LEADER

    @property
    def groups(self):
        groups = {PermissionGroup.GENERAL}
        if self.is_club_leadership or self.is_team_leader:
            groups.add(PermissionGroup.TEAM_LEADERSHIP)
        if self.is_club_leadership:
            groups.add(PermissionGroup.CLUB_LEADERSHIP)
        return frozenset(groups)

    def has_group(self, group):
        return PermissionGroup(group) in self.groups

    @property
    def review_visibility(self):
        if self.is_club_leadership:
            return ReviewVisibility.ALL
        if self.is_team_leader:
            return ReviewVisibility.TEAM
        return ReviewVisibility.NONE

    def can_review(self, requester_team_id):
        """Whether a request from a member of ``requester_team_id`` may be reviewed"""
        visibility = self.review_visibility
        if visibility == ReviewVisibility.ALL:
            return True
        if visibility == ReviewVisibility.TEAM:
            return requester_team_id is not None and requester_team_id == self.team_id
        return False

    # Manual grants follow the same boundary as reviews
    can_grant_to = can_review


NO_SCOPE = Scope(club_role=ClubRole.MEMBER)


def resolve_scope(profile, membership):
    """Compute the scope for a profile and its optional team membership.

    ``profile`` may be None (registration not completed), in which case only
    the general group is granted.
    """
    club_role = profile.club_role if profile is not None else ClubRole.MEMBER
    if membership is None:
        return Scope(club_role=ClubRole(club_role))
    return Scope(
        club_role=ClubRole(club_role),
        team_id=membership.team_id,
        role_in_team=TeamRole(membership.role_in_team),
    )


def get_user_scope(user):
    """Load profile and membership fresh from the store and resolve the scope"""
    if user is None or not user.is_authenticated:
        return NO_SCOPE

    profile = Profile.objects.filter(user=user).first()
    membership = TeamMembership.objects.filter(user=user).first()
    return resolve_scope(profile, membership)
