"""
Hour request views for Student Club Portal
Member submissions, leadership review queues and manual grants
"""
from rest_framework import generics, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.permissions import HasProfile, IsClubLeadership, IsTeamLeadership, request_scope
from .serializers import (
    GrantTargetSerializer, HourGrantSerializer, HourRequestCreateSerializer,
    HourRequestSerializer, HourReviewSerializer, HourTotalsSerializer
)
from . import utils


class MyHourRequestsView(generics.ListCreateAPIView):
    """Own submission history and new submissions"""

    serializer_class = HourRequestSerializer
    permission_classes = [IsAuthenticated, HasProfile]

    def get_queryset(self):
        return utils.user_hour_requests(self.request.user)

    def create(self, request, *args, **kwargs):
        serializer = HourRequestCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        hour_request = utils.submit_hour_request(request.user, **serializer.validated_data)

        return Response({
            'message': 'Your request has been submitted for review.',
            'request': HourRequestSerializer(hour_request).data
        }, status=status.HTTP_201_CREATED)


class PendingReviewView(generics.ListAPIView):
    """Pending requests within the reviewer's scope, oldest first"""

    serializer_class = HourRequestSerializer
    permission_classes = [IsTeamLeadership]

    def get_queryset(self):
        return utils.pending_queue(request_scope(self.request))


class ReviewArchiveView(generics.ListAPIView):
    """Reviewed requests, filterable by team"""

    serializer_class = HourRequestSerializer
    permission_classes = [IsTeamLeadership]

    def get_queryset(self):
        team_id = self.request.query_params.get('team')
        return utils.archived_requests(request_scope(self.request), team_id=team_id)


class ReviewHourRequestView(APIView):
    """Approve or reject a pending request"""

    permission_classes = [IsTeamLeadership]

    def post(self, request, request_id):
        serializer = HourReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        hour_request = utils.review_hour_request(
            request.user,
            request_id,
            data['decision'],
            awarded_hours=data.get('awarded_hours'),
            notes=data.get('notes', ''),
        )

        return Response({
            'message': f'Request {hour_request.status}.',
            'request': HourRequestSerializer(hour_request).data
        }, status=status.HTTP_200_OK)


class GrantHoursView(APIView):
    """List grant targets and record hours for a member directly"""

    permission_classes = [IsTeamLeadership]

    def get(self, request):
        targets = [
            {'user_id': p.user_id, 'full_name': p.full_name, 'student_id': p.student_id}
            for p in utils.grant_targets(request_scope(request))
        ]
        return Response(GrantTargetSerializer(targets, many=True).data)

    def post(self, request):
        serializer = HourGrantSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        hour_request = utils.grant_hours(
            request.user,
            data['member_id'],
            data['task_description'],
            data['hours'],
            activity_title=data.get('activity_title') or None,
            task_type=data.get('task_type', ''),
        )

        return Response({
            'message': f'{hour_request.awarded_hours} hours recorded.',
            'request': HourRequestSerializer(hour_request).data
        }, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_hour_totals(request):
    """Event hours, extra hours and their sum for the current user"""
    totals = utils.compute_hour_totals(request.user)
    return Response(HourTotalsSerializer(totals).data)


@api_view(['GET'])
@permission_classes([IsClubLeadership])
def hours_leaderboard(request):
    try:
        limit = max(1, min(int(request.query_params.get('limit', 20)), 100))
    except ValueError:
        limit = 20
    return Response({'results': utils.hours_leaderboard(limit=limit)})
