"""
Team views for Student Club Portal
"""
from django.db.models import Count
from rest_framework import generics, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.exceptions import NotFound
from apps.common.permissions import HasProfile, IsClubLeadership, IsClubLeadershipOrReadOnly, IsTeamLeadership
from .models import Team, TeamMembership
from .serializers import TeamMembershipSerializer, TeamRoleSerializer, TeamSerializer
from . import utils


class TeamListView(generics.ListCreateAPIView):
    """List teams; club leadership creates them"""

    serializer_class = TeamSerializer
    permission_classes = [IsAuthenticated, IsClubLeadershipOrReadOnly]
    pagination_class = None

    def get_queryset(self):
        return Team.objects.annotate(num_members=Count('memberships')).order_by('name')


class TeamDetailView(generics.RetrieveUpdateAPIView):
    serializer_class = TeamSerializer
    permission_classes = [IsAuthenticated, IsClubLeadershipOrReadOnly]
    lookup_url_kwarg = 'team_id'

    def get_queryset(self):
        return Team.objects.annotate(num_members=Count('memberships'))


class TeamMembersView(generics.ListAPIView):
    serializer_class = TeamMembershipSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        team = utils.get_team(self.kwargs['team_id'])
        return utils.team_members(team.pk)


class JoinTeamView(APIView):
    """Join a team"""

    permission_classes = [IsAuthenticated, HasProfile]

    def post(self, request, team_id):
        team = utils.get_team(team_id)
        membership = utils.join_team(request.user, team)

        return Response({
            'message': f'You joined {team.name}.',
            'membership': TeamMembershipSerializer(membership).data
        }, status=status.HTTP_201_CREATED)


class LeaveTeamView(APIView):
    """Leave the current team"""

    permission_classes = [IsAuthenticated]

    def post(self, request):
        utils.leave_team(request.user)
        return Response({'message': 'You left your team.'}, status=status.HTTP_200_OK)


class TeamRoleView(APIView):
    """Club leadership sets a member's role inside their team"""

    permission_classes = [IsClubLeadership]

    def patch(self, request, user_id):
        serializer = TeamRoleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        membership = utils.set_team_role(user_id, serializer.validated_data['role_in_team'])
        return Response(TeamMembershipSerializer(membership).data)


@api_view(['GET'])
@permission_classes([IsTeamLeadership])
def my_team_members(request):
    """Members of the caller's own team"""
    membership = TeamMembership.objects.filter(user=request.user).first()
    if membership is None:
        raise NotFound('You are not a member of any team.')

    members = utils.team_members(membership.team_id)
    return Response(TeamMembershipSerializer(members, many=True).data)
