"""
Contact views for Student Club Portal
"""
import logging

from rest_framework import generics, status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.exceptions import NotFound
from apps.common.permissions import IsClubLeadership
from apps.common.utils import get_client_ip
from .models import ContactMessage
from .serializers import ContactMessageSerializer

logger = logging.getLogger(__name__)


class ContactMessageCreateView(generics.CreateAPIView):
    """Public contact form"""

    serializer_class = ContactMessageSerializer
    permission_classes = [AllowAny]
    authentication_classes = []

    def perform_create(self, serializer):
        message = serializer.save()
        logger.info("Contact message %s received from %s", message.pk, get_client_ip(self.request))


class ContactMessageListView(generics.ListAPIView):
    """Messages for club leadership, unread first"""

    serializer_class = ContactMessageSerializer
    permission_classes = [IsClubLeadership]

    def get_queryset(self):
        queryset = ContactMessage.objects.order_by('is_read', '-created_at')
        if self.request.query_params.get('unread') in ('1', 'true'):
            queryset = queryset.filter(is_read=False)
        return queryset


class MarkMessageReadView(APIView):
    permission_classes = [IsClubLeadership]

    def post(self, request, message_id):
        updated = ContactMessage.objects.filter(pk=message_id).update(is_read=True)
        if not updated:
            raise NotFound('Message not found')
        return Response({'message': 'Marked as read.'}, status=status.HTTP_200_OK)
