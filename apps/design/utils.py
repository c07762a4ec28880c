"""
Design request utilities for Student Club Portal
State machine for design tickets:

    new -> in_progress -> awaiting_review -> completed
                                          -> rejected -> awaiting_review
"""
import logging

from django.utils import timezone

from apps.authentication.scopes import PermissionGroup, get_user_scope
from apps.common.exceptions import Conflict, NotFound, ScopeDenied, ValidationFailed
from apps.teams.models import TeamMembership
from .models import DesignRequest, DesignStatus

logger = logging.getLogger(__name__)

CLAIM = 'claim'
DELIVER = 'deliver'
ACCEPT = 'accept'
REJECT = 'reject'

# action -> (allowed source states, target state)
TRANSITIONS = {
    CLAIM: ((DesignStatus.NEW,), DesignStatus.IN_PROGRESS),
    DELIVER: ((DesignStatus.IN_PROGRESS, DesignStatus.REJECTED), DesignStatus.AWAITING_REVIEW),
    ACCEPT: ((DesignStatus.AWAITING_REVIEW,), DesignStatus.COMPLETED),
    REJECT: ((DesignStatus.AWAITING_REVIEW,), DesignStatus.REJECTED),
}


def is_design_reviewer(user):
    """Members of a design team, or club leadership"""
    if get_user_scope(user).is_club_leadership:
        return True
    return TeamMembership.objects.filter(user=user, team__handles_design_requests=True).exists()


def get_design_request(request_id):
    try:
        return DesignRequest.objects.get(pk=request_id)
    except (DesignRequest.DoesNotExist, ValueError):
        raise NotFound('Design request not found')


def _transition(design_request, action, **changes):
    """Apply ``action`` only if the row is still in one of its source states"""
    sources, target = TRANSITIONS[action]
    if design_request.status not in sources:
        raise Conflict(f"Cannot {action} a request that is {design_request.get_status_display().lower()}.")

    updated = DesignRequest.objects.filter(
        pk=design_request.pk,
        status__in=sources,
        **({'assigned_to': design_request.assigned_to_id} if action == DELIVER else {})
    ).update(status=target, updated_at=timezone.now(), **changes)

    if not updated:
        raise Conflict('This request was changed by someone else. Reload and try again.')

    logger.info("Design request %s: %s -> %s", design_request.pk, design_request.status, target)
    design_request.refresh_from_db()
    return design_request


def submit_design_request(user, title, design_type, description, deadline=None):
    if not get_user_scope(user).has_group(PermissionGroup.TEAM_LEADERSHIP):
        raise ScopeDenied('Only team or club leadership can request designs.')

    design_request = DesignRequest.objects.create(
        user=user,
        title=title,
        design_type=design_type,
        description=description,
        deadline=deadline,
        status=DesignStatus.NEW,
    )
    logger.info("Design request %s submitted by %s", design_request.pk, user.pk)
    return design_request


def claim(actor, request_id):
    """Take an unclaimed request; of two concurrent claims only one wins"""
    if not is_design_reviewer(actor):
        raise ScopeDenied('Only the design team can claim requests.')

    design_request = get_design_request(request_id)
    return _transition(design_request, CLAIM, assigned_to=actor)


def submit_deliverable(actor, request_id, design_url):
    design_request = get_design_request(request_id)
    if design_request.assigned_to_id != actor.pk:
        raise ScopeDenied('Only the assigned designer can submit the deliverable.')
    if not (design_url or '').strip():
        raise ValidationFailed('A design URL is required.')

    return _transition(design_request, DELIVER, design_url=design_url.strip())


def _check_can_decide(actor, design_request):
    if design_request.user_id != actor.pk and not is_design_reviewer(actor):
        raise ScopeDenied('Only the requester or the design team can review this design.')


def accept(actor, request_id):
    design_request = get_design_request(request_id)
    _check_can_decide(actor, design_request)
    return _transition(design_request, ACCEPT, feedback_notes='')


def reject(actor, request_id, feedback_notes):
    design_request = get_design_request(request_id)
    _check_can_decide(actor, design_request)
    if not (feedback_notes or '').strip():
        raise ValidationFailed('Feedback notes are required to reject a design.')

    return _transition(design_request, REJECT, feedback_notes=feedback_notes.strip())


def new_requests():
    return DesignRequest.objects.filter(status=DesignStatus.NEW).select_related('user__profile').order_by('created_at')


def my_queue(actor):
    return (
        DesignRequest.objects
        .filter(assigned_to=actor, status__in=[DesignStatus.IN_PROGRESS, DesignStatus.REJECTED])
        .select_related('user__profile')
        .order_by('deadline', 'created_at')
    )


def my_archive(actor):
    return (
        DesignRequest.objects
        .filter(assigned_to=actor, status__in=[DesignStatus.AWAITING_REVIEW, DesignStatus.COMPLETED])
        .select_related('user__profile')
        .order_by('-updated_at')
    )


def my_requests(user):
    return DesignRequest.objects.filter(user=user).select_related('assigned_to__profile').order_by('-created_at')
