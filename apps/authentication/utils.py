"""
Profile utilities for Student Club Portal
Everything the profile page needs, loaded in one place
"""
import logging
from dataclasses import dataclass, field

from django.db import transaction

from apps.events.utils import user_registrations
from apps.hours.utils import compute_hour_totals
from apps.teams.models import TeamMembership
from .models import ClubApplication, ClubRole, Profile, User
from .scopes import resolve_scope

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TeamInfo:
    id: object
    name: str
    leader_title: str
    role_in_team: str


@dataclass(frozen=True)
class ProfileBundle:
    profile: Profile
    team: TeamInfo = None
    registrations: list = field(default_factory=list)
    event_hours: float = 0.0
    extra_hours: float = 0.0
    total_hours: float = 0.0
    scope: object = None
    hours_visible: bool = True

    @property
    def profile_complete(self):
        return self.profile is not None


# Returned when the principal has not completed registration yet
NO_PROFILE = ProfileBundle(profile=None)


def load_profile_bundle(user):
    """Profile, team, registrations, hour totals and resolved scope.

    Returns NO_PROFILE when the user has no profile row. Database errors
    propagate to the caller.
    """
    profile = Profile.objects.filter(user=user).select_related('user').first()
    if profile is None:
        return NO_PROFILE

    membership = TeamMembership.objects.select_related('team').filter(user=user).first()
    team = None
    if membership is not None:
        team = TeamInfo(
            id=membership.team_id,
            name=membership.team.name,
            leader_title=membership.team.leader_title,
            role_in_team=membership.role_in_team,
        )

    totals = compute_hour_totals(user)

    return ProfileBundle(
        profile=profile,
        team=team,
        registrations=list(user_registrations(user)),
        event_hours=totals.event_hours,
        extra_hours=totals.extra_hours,
        total_hours=totals.total,
        scope=resolve_scope(profile, membership),
        hours_visible=profile.club_role != ClubRole.CLUB_SUPERVISOR,
    )


@transaction.atomic
def register_member(email, password, profile_data, application_data=None):
    """Create the principal, its profile and its membership application together"""
    user = User.objects.create_user(email=email, password=password)
    profile = Profile.objects.create(user=user, **profile_data)
    ClubApplication.objects.create(user=user, **(application_data or {}))

    logger.info("Registered new member %s", user.pk)
    return user, profile


@transaction.atomic
def submit_committee_application(user, preferred_committee, event_idea='', interested_in_specific_event=''):
    """Upsert the user's application and record the chosen committee on the profile"""
    application, created = ClubApplication.objects.update_or_create(
        user=user,
        defaults={
            'preferred_committee': preferred_committee,
            'event_idea': event_idea,
            'interested_in_specific_event': interested_in_specific_event,
        },
    )
    Profile.objects.filter(user=user).update(committee=preferred_committee)

    logger.info("Committee application %s for %s", 'created' if created else 'updated', user.pk)
    return application
