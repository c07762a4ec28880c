from unittest import mock

import pytest

from apps.common.exceptions import Conflict, ScopeDenied, ValidationFailed
from apps.design import utils
from apps.design.models import DesignRequest, DesignStatus


@pytest.fixture
def designer(make_user, design_team, add_to_team):
    user = make_user(full_name='Dina Designer')
    add_to_team(user, design_team)
    return user


@pytest.fixture
def ticket(team_leader):
    return utils.submit_design_request(team_leader, 'Poster', 'poster', 'A3 poster for the hackathon')


@pytest.mark.django_db
class TestDesignLifecycle:
    def test_full_cycle_with_one_rejection(self, team_leader, designer, ticket):
        assert ticket.status == DesignStatus.NEW

        claimed = utils.claim(designer, ticket.pk)
        assert claimed.status == DesignStatus.IN_PROGRESS
        assert claimed.assigned_to == designer
        assert list(utils.my_queue(designer)) == [claimed]

        delivered = utils.submit_deliverable(designer, ticket.pk, 'https://files.example/poster-v1.png')
        assert delivered.status == DesignStatus.AWAITING_REVIEW

        rejected = utils.reject(team_leader, ticket.pk, 'Use the club colours')
        assert rejected.status == DesignStatus.REJECTED
        assert rejected.feedback_notes == 'Use the club colours'
        assert list(utils.my_queue(designer)) == [rejected]

        redelivered = utils.submit_deliverable(designer, ticket.pk, 'https://files.example/poster-v2.png')
        assert redelivered.status == DesignStatus.AWAITING_REVIEW
        assert redelivered.design_url.endswith('v2.png')

        completed = utils.accept(team_leader, ticket.pk)
        assert completed.status == DesignStatus.COMPLETED
        assert completed.feedback_notes == ''
        assert list(utils.my_archive(designer)) == [completed]
        assert list(utils.my_queue(designer)) == []

    def test_submission_needs_team_leadership(self, member):
        with pytest.raises(ScopeDenied):
            utils.submit_design_request(member, 'Logo', 'logo', 'New club logo')

    def test_only_design_reviewers_claim(self, member, ticket):
        with pytest.raises(ScopeDenied):
            utils.claim(member, ticket.pk)

    def test_club_leadership_can_claim(self, club_leader, ticket):
        assert utils.claim(club_leader, ticket.pk).assigned_to == club_leader

    def test_second_claim_conflicts(self, designer, club_leader, ticket):
        utils.claim(designer, ticket.pk)

        with pytest.raises(Conflict):
            utils.claim(club_leader, ticket.pk)

        ticket.refresh_from_db()
        assert ticket.assigned_to == designer

    def test_concurrent_claim_loses(self, designer, club_leader, ticket):
        stale = DesignRequest.objects.get(pk=ticket.pk)
        utils.claim(designer, ticket.pk)

        with mock.patch.object(utils, 'get_design_request', return_value=stale):
            with pytest.raises(Conflict):
                utils.claim(club_leader, ticket.pk)

        ticket.refresh_from_db()
        assert ticket.assigned_to == designer

    def test_only_assignee_delivers(self, designer, make_user, design_team, add_to_team, ticket):
        colleague = make_user()
        add_to_team(colleague, design_team)
        utils.claim(designer, ticket.pk)

        with pytest.raises(ScopeDenied):
            utils.submit_deliverable(colleague, ticket.pk, 'https://files.example/x.png')

    def test_deliverable_needs_url(self, designer, ticket):
        utils.claim(designer, ticket.pk)

        with pytest.raises(ValidationFailed):
            utils.submit_deliverable(designer, ticket.pk, '   ')

        ticket.refresh_from_db()
        assert ticket.status == DesignStatus.IN_PROGRESS

    def test_reject_needs_feedback(self, team_leader, designer, ticket):
        utils.claim(designer, ticket.pk)
        utils.submit_deliverable(designer, ticket.pk, 'https://files.example/x.png')

        with pytest.raises(ValidationFailed):
            utils.reject(team_leader, ticket.pk, '')

        ticket.refresh_from_db()
        assert ticket.status == DesignStatus.AWAITING_REVIEW

    def test_accept_before_delivery_conflicts(self, team_leader, ticket):
        with pytest.raises(Conflict):
            utils.accept(team_leader, ticket.pk)

    def test_outsider_cannot_accept(self, member, designer, ticket):
        utils.claim(designer, ticket.pk)
        utils.submit_deliverable(designer, ticket.pk, 'https://files.example/x.png')

        with pytest.raises(ScopeDenied):
            utils.accept(member, ticket.pk)

    def test_new_requests_queue(self, designer, ticket, team_leader):
        other = utils.submit_design_request(team_leader, 'Banner', 'banner', 'Roll-up banner')
        utils.claim(designer, other.pk)

        assert list(utils.new_requests()) == [ticket]
        assert set(utils.my_requests(team_leader)) == {ticket, other}
