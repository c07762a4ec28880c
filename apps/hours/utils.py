"""
Volunteer hour utilities for Student Club Portal
Hour-request lifecycle, review queues and hour totals
"""
import logging
import uuid
from collections import defaultdict
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from django.conf import settings
from django.db import transaction
from django.db.models import Sum
from django.utils import timezone

from apps.authentication.models import ClubRole, Profile
from apps.authentication.scopes import ReviewVisibility, get_user_scope
from apps.common.exceptions import Conflict, NotFound, ScopeDenied, ValidationFailed
from apps.common.models import ReviewStatus
from apps.events.models import EventRegistration, RegistrationStatus
from apps.teams.models import TeamMembership
from .models import HourRequest

logger = logging.getLogger(__name__)

APPROVE = 'approve'
REJECT = 'reject'
DECISIONS = {APPROVE: ReviewStatus.APPROVED, REJECT: ReviewStatus.REJECTED}

ONE_PLACE = Decimal('0.1')


@dataclass(frozen=True)
class HourTotals:
    event_hours: float
    extra_hours: float

    @property
    def total(self):
        return round(self.event_hours + self.extra_hours, 2)


def parse_hours(value, minimum=None):
    """Positive hours with at most one decimal place, capped at MAX_AWARDED_HOURS"""
    if value is None or value == '':
        raise ValidationFailed('A number of hours is required.')
    try:
        hours = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationFailed('Hours must be a number.')

    if not hours.is_finite() or hours <= 0:
        raise ValidationFailed('Hours must be a positive number.')
    if hours != hours.quantize(ONE_PLACE):
        raise ValidationFailed('Hours can have at most one decimal place.')
    if minimum is not None and hours < minimum:
        raise ValidationFailed(f'At least {minimum} hours must be recorded.')
    if hours > settings.MAX_AWARDED_HOURS:
        raise ValidationFailed(f'No more than {settings.MAX_AWARDED_HOURS} hours can be recorded.')
    return hours.quantize(ONE_PLACE)


def team_id_of(user_id):
    return TeamMembership.objects.filter(user_id=user_id).values_list('team_id', flat=True).first()


def submit_hour_request(user, activity_title, task_description, task_type='', image_url=''):
    """Self-submission by a member; always starts pending"""
    if not Profile.objects.filter(user=user).exists():
        raise ScopeDenied('Complete your profile first.')

    hour_request = HourRequest.objects.create(
        user=user,
        team_id=team_id_of(user.pk),
        activity_title=activity_title,
        task_description=task_description,
        task_type=task_type,
        image_url=image_url,
        status=ReviewStatus.PENDING,
    )
    logger.info("Hour request %s submitted by %s", hour_request.pk, user.pk)
    return hour_request


def grant_hours(actor, member_id, task_description, hours, activity_title=None, task_type=''):
    """Manual grant: created already approved, reviewed by the granting leader"""
    scope = get_user_scope(actor)

    member = Profile.objects.select_related('user').filter(user_id=member_id).first()
    if member is None:
        raise NotFound('Member not found')

    member_team_id = team_id_of(member.user_id)
    if not scope.can_grant_to(member_team_id):
        logger.warning("Grant by %s to %s denied: outside scope", actor.pk, member.user_id)
        raise ScopeDenied('You can only record hours for members of your team.')

    if len((task_description or '').strip()) < 10:
        raise ValidationFailed('The task description must be at least 10 characters.')
    hours = parse_hours(hours, minimum=Decimal(settings.MIN_GRANTED_HOURS))

    now = timezone.now()
    hour_request = HourRequest.objects.create(
        user=member.user,
        team_id=member_team_id,
        activity_title=activity_title or settings.MANUAL_GRANT_TITLE,
        task_description=task_description,
        task_type=task_type,
        status=ReviewStatus.APPROVED,
        awarded_hours=hours,
        reviewed_by=actor,
        reviewed_at=now,
    )
    logger.info("%s hours granted to %s by %s", hours, member.user_id, actor.pk)
    return hour_request


def review_hour_request(actor, request_id, decision, awarded_hours=None, notes=''):
    """Approve or reject a pending request exactly once.

    The update is conditional on the row still being pending, so of two
    concurrent reviewers only one succeeds; the other gets a Conflict.
    """
    if decision not in DECISIONS:
        raise ValidationFailed("Decision must be 'approve' or 'reject'.")

    scope = get_user_scope(actor)
    try:
        hour_request = HourRequest.objects.get(pk=request_id)
    except (HourRequest.DoesNotExist, ValueError):
        raise NotFound('Hour request not found')

    if not scope.can_review(team_id_of(hour_request.user_id)):
        logger.warning("Review of %s by %s denied: outside scope", request_id, actor.pk)
        raise ScopeDenied('You cannot review requests outside your scope.')

    if hour_request.status != ReviewStatus.PENDING:
        raise Conflict('This request has already been reviewed.')

    new_status = DECISIONS[decision]
    hours = parse_hours(awarded_hours) if new_status == ReviewStatus.APPROVED else None

    now = timezone.now()
    with transaction.atomic():
        updated = HourRequest.objects.filter(pk=hour_request.pk, status=ReviewStatus.PENDING).update(
            status=new_status,
            awarded_hours=hours,
            notes=notes or '',
            reviewed_by=actor,
            reviewed_at=now,
            updated_at=now,
        )
        if not updated:
            raise Conflict('This request has already been reviewed.')

        transaction.on_commit(lambda: _queue_review_notification(hour_request.pk))

    logger.info("Hour request %s %s by %s", hour_request.pk, new_status, actor.pk)
    hour_request.refresh_from_db()
    return hour_request


def _queue_review_notification(request_id):
    from .tasks import notify_hour_request_reviewed

    notify_hour_request_reviewed.delay(str(request_id))


def visible_hour_requests(scope):
    """Requests a reviewer may see, per their review visibility"""
    queryset = HourRequest.objects.select_related('user__profile', 'reviewed_by__profile', 'team')
    visibility = scope.review_visibility
    if visibility == ReviewVisibility.ALL:
        return queryset
    if visibility == ReviewVisibility.TEAM:
        return queryset.filter(user__team_membership__team_id=scope.team_id)
    return queryset.none()


def pending_queue(scope):
    return visible_hour_requests(scope).filter(status=ReviewStatus.PENDING).order_by('created_at')


def archived_requests(scope, team_id=None):
    queryset = visible_hour_requests(scope).exclude(status=ReviewStatus.PENDING)
    if team_id:
        try:
            team_id = uuid.UUID(str(team_id))
        except ValueError:
            raise ValidationFailed('Unknown team.')
        queryset = queryset.filter(team_id=team_id)
    return queryset.order_by('-reviewed_at', '-created_at')


def user_hour_requests(user):
    return HourRequest.objects.filter(user=user).select_related('reviewed_by__profile').order_by('-created_at')


def grant_targets(scope):
    """Profiles a leader may grant hours to"""
    queryset = Profile.objects.select_related('user').exclude(full_name='')
    visibility = scope.review_visibility
    if visibility == ReviewVisibility.ALL:
        return queryset.order_by('full_name')
    if visibility == ReviewVisibility.TEAM:
        return queryset.filter(user__team_membership__team_id=scope.team_id).order_by('full_name')
    return queryset.none()


def _event_hours_by_user(user_id=None):
    attended = EventRegistration.objects.filter(status=RegistrationStatus.ATTENDED)
    if user_id is not None:
        attended = attended.filter(user_id=user_id)

    totals = defaultdict(float)
    for uid, start, end in attended.values_list('user_id', 'event__start_time', 'event__end_time'):
        totals[uid] += (end - start).total_seconds() / 3600
    return totals


def compute_hour_totals(user):
    """Event hours from attended events plus approved extra hours"""
    event_hours = _event_hours_by_user(user.pk).get(user.pk, 0.0)
    extra = HourRequest.objects.filter(
        user=user, status=ReviewStatus.APPROVED
    ).aggregate(total=Sum('awarded_hours'))['total'] or Decimal('0')

    return HourTotals(event_hours=round(event_hours, 2), extra_hours=float(extra))


def hours_leaderboard(limit=20):
    """Members ranked by total hours; supervisors are not ranked"""
    extra = dict(
        HourRequest.objects.filter(status=ReviewStatus.APPROVED)
        .values('user_id')
        .annotate(total=Sum('awarded_hours'))
        .values_list('user_id', 'total')
    )
    event = _event_hours_by_user()

    rows = []
    profiles = Profile.objects.exclude(club_role=ClubRole.CLUB_SUPERVISOR).only('user_id', 'full_name')
    for profile in profiles:
        totals = HourTotals(
            event_hours=round(event.get(profile.user_id, 0.0), 2),
            extra_hours=float(extra.get(profile.user_id) or 0),
        )
        rows.append({
            'user_id': profile.user_id,
            'full_name': profile.full_name,
            'event_hours': totals.event_hours,
            'extra_hours': totals.extra_hours,
            'total_hours': totals.total,
        })

    rows.sort(key=lambda row: (-row['total_hours'], row['full_name']))
    return rows[:limit]
