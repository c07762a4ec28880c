"""
Design request views for Student Club Portal
"""
from rest_framework import generics, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.exceptions import ScopeDenied
from apps.common.permissions import IsTeamLeadership
from .serializers import (
    DeliverableSerializer, DesignRejectSerializer, DesignRequestCreateSerializer, DesignRequestSerializer
)
from . import utils


class MyDesignRequestsView(generics.ListCreateAPIView):
    """Requests raised by the caller, and new submissions"""

    serializer_class = DesignRequestSerializer
    permission_classes = [IsTeamLeadership]

    def get_queryset(self):
        return utils.my_requests(self.request.user)

    def create(self, request, *args, **kwargs):
        serializer = DesignRequestCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        design_request = utils.submit_design_request(request.user, **serializer.validated_data)

        return Response({
            'message': 'Design request submitted.',
            'request': DesignRequestSerializer(design_request).data
        }, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def design_queue(request):
    """Unclaimed requests, the caller's active work and their delivered work"""
    if not utils.is_design_reviewer(request.user):
        raise ScopeDenied('Only the design team can view the design queue.')

    return Response({
        'new': DesignRequestSerializer(utils.new_requests(), many=True).data,
        'in_progress': DesignRequestSerializer(utils.my_queue(request.user), many=True).data,
        'archive': DesignRequestSerializer(utils.my_archive(request.user), many=True).data,
    })


class DesignTransitionView(APIView):
    permission_classes = [IsAuthenticated]
    message = None

    def respond(self, design_request):
        return Response({
            'message': self.message,
            'request': DesignRequestSerializer(design_request).data
        }, status=status.HTTP_200_OK)


class ClaimDesignRequestView(DesignTransitionView):
    message = 'Request claimed.'

    def post(self, request, request_id):
        return self.respond(utils.claim(request.user, request_id))


class DeliverDesignView(DesignTransitionView):
    message = 'Design submitted for review.'

    def post(self, request, request_id):
        serializer = DeliverableSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self.respond(
            utils.submit_deliverable(request.user, request_id, serializer.validated_data['design_url'])
        )


class AcceptDesignView(DesignTransitionView):
    message = 'Design accepted.'

    def post(self, request, request_id):
        return self.respond(utils.accept(request.user, request_id))


class RejectDesignView(DesignTransitionView):
    message = 'Design returned with feedback.'

    def post(self, request, request_id):
        serializer = DesignRejectSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self.respond(
            utils.reject(request.user, request_id, serializer.validated_data['feedback_notes'])
        )
