"""
Team utilities for Student Club Portal
Joining, leaving and team role assignment
"""
import logging

from django.db import IntegrityError, transaction

from apps.authentication.models import Profile
from apps.common.exceptions import Conflict, NotFound, ValidationFailed
from .models import Team, TeamMembership, TeamRole

logger = logging.getLogger(__name__)


def get_team(team_id):
    try:
        return Team.objects.get(pk=team_id)
    except (Team.DoesNotExist, ValueError):
        raise NotFound('Team not found')


def join_team(user, team, role=TeamRole.MEMBER):
    """A member belongs to at most one team"""
    if not Profile.objects.filter(user=user).exists():
        raise ValidationFailed('Complete your profile first.')

    try:
        with transaction.atomic():
            if TeamMembership.objects.filter(user=user).exists():
                raise Conflict('You are already a member of a team.')
            membership = TeamMembership.objects.create(user=user, team=team, role_in_team=TeamRole(role))
    except IntegrityError:
        raise Conflict('You are already a member of a team.')

    logger.info("User %s joined team %s", user.pk, team.pk)
    return membership


def leave_team(user):
    deleted, _ = TeamMembership.objects.filter(user=user).delete()
    if not deleted:
        raise NotFound('You are not a member of any team.')
    logger.info("User %s left their team", user.pk)


def set_team_role(user_id, role_in_team):
    """Change a member's role within their current team"""
    try:
        role = TeamRole(role_in_team)
    except ValueError:
        raise ValidationFailed(f"Unknown team role '{role_in_team}'.")

    membership = TeamMembership.objects.select_related('team').filter(user_id=user_id).first()
    if membership is None:
        raise NotFound('This user is not a member of any team.')

    membership.role_in_team = role
    membership.save(update_fields=['role_in_team', 'updated_at'])
    logger.info("User %s is now %s of team %s", user_id, role.value, membership.team_id)
    return membership


def team_members(team_id):
    return (
        TeamMembership.objects
        .filter(team_id=team_id)
        .select_related('user__profile')
        .order_by('role_in_team', 'user__profile__full_name')
    )
