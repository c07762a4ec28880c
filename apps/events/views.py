"""
Event views for Student Club Portal
API endpoints for event management, registration and check-in
"""
import logging

from django.http import HttpResponse
from rest_framework import generics, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.permissions import HasProfile, IsClubLeadership, IsClubLeadershipOrReadOnly, request_scope
from .models import Event, EventReport, RegistrationRole
from .serializers import (
    CheckInSerializer, EventRegistrationCreateSerializer, EventRegistrationSerializer,
    EventReportSerializer, EventSerializer, EventWriteSerializer, MyRegistrationSerializer
)
from . import utils

logger = logging.getLogger(__name__)


class EventContextMixin:
    """Shows the check-in code to club leadership only"""

    def get_serializer_context(self):
        context = super().get_serializer_context()
        user = self.request.user
        context['show_check_in_code'] = bool(
            user and user.is_authenticated and request_scope(self.request).is_club_leadership
        )
        return context


class EventListView(EventContextMixin, generics.ListCreateAPIView):
    """List events with the upcoming/past/all tabs; club leadership creates"""

    permission_classes = [IsClubLeadershipOrReadOnly]

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return EventWriteSerializer
        return EventSerializer

    def get_queryset(self):
        return utils.filter_events(
            utils.with_attendee_count(Event.objects.all()),
            time_filter=self.request.query_params.get('time', 'upcoming'),
            category=self.request.query_params.get('category'),
        )

    def create(self, request, *args, **kwargs):
        serializer = EventWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = serializer.save(created_by=request.user)

        logger.info("Event %s created by %s", event.pk, request.user.pk)
        return Response(
            EventSerializer(event, context={'show_check_in_code': True}).data,
            status=status.HTTP_201_CREATED
        )


class EventDetailView(EventContextMixin, generics.RetrieveUpdateDestroyAPIView):
    """Event detail view with update and delete"""

    permission_classes = [IsClubLeadershipOrReadOnly]
    lookup_url_kwarg = 'event_id'

    def get_serializer_class(self):
        if self.request.method in ('PUT', 'PATCH'):
            return EventWriteSerializer
        return EventSerializer

    def get_object(self):
        event = utils.get_event(self.kwargs['event_id'])
        self.check_object_permissions(self.request, event)
        return event

    def retrieve(self, request, *args, **kwargs):
        event = self.get_object()
        data = self.get_serializer(event).data
        if request.user.is_authenticated:
            data['registration_status'] = utils.registration_status(request.user, event)
            data['check_in_window'] = utils.check_in_window(event).value
        return Response(data)

    def update(self, request, *args, **kwargs):
        event = self.get_object()
        serializer = EventWriteSerializer(event, data=request.data, partial=kwargs.get('partial', False))
        serializer.is_valid(raise_exception=True)
        event = serializer.save()

        return Response(EventSerializer(utils.get_event(event.pk), context={'show_check_in_code': True}).data)

    def perform_destroy(self, instance):
        logger.info("Event %s deleted by %s", instance.pk, self.request.user.pk)
        instance.delete()


class EventRegistrationView(APIView):
    """Register for an event"""

    permission_classes = [IsAuthenticated, HasProfile]

    def post(self, request, event_id):
        event = utils.get_event(event_id, annotate=False)

        serializer = EventRegistrationCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        role = serializer.validated_data['role']

        registration = utils.register_for_event(request.user, event, role)

        data = {
            'message': f'Successfully registered for {event.title}',
            'registration': MyRegistrationSerializer(registration).data
        }
        if registration.role == RegistrationRole.ORGANIZER:
            data['organizer_contact_link'] = event.organizer_contact_link or None

        return Response(data, status=status.HTTP_201_CREATED)


class EventCheckInView(APIView):
    """Check-in window state and code submission"""

    permission_classes = [IsAuthenticated]

    def get(self, request, event_id):
        event = utils.get_event(event_id, annotate=False)
        return Response({
            'window': utils.check_in_window(event).value,
            'registration_status': utils.registration_status(request.user, event),
            'opens_at': event.start_time,
            'closes_at': event.check_in_deadline,
        })

    def post(self, request, event_id):
        event = utils.get_event(event_id, annotate=False)

        serializer = CheckInSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        outcome = utils.check_in(request.user, event, serializer.validated_data['code'])

        return Response({
            'outcome': outcome.value,
            'message': utils.OUTCOME_MESSAGES[outcome],
        }, status=status.HTTP_200_OK)


class EventParticipantsView(generics.ListAPIView):
    """Participants with attendance status"""

    serializer_class = EventRegistrationSerializer
    permission_classes = [IsClubLeadership]
    pagination_class = None

    def get_queryset(self):
        event = utils.get_event(self.kwargs['event_id'], annotate=False)
        return utils.event_participants(event)


class EventReportView(APIView):
    """Post-event report"""

    permission_classes = [IsClubLeadership]

    def get(self, request, event_id):
        event = utils.get_event(event_id, annotate=False)
        report = EventReport.objects.filter(event=event).first()
        if report is None:
            return Response({'report': None})
        return Response({'report': EventReportSerializer(report).data})

    def put(self, request, event_id):
        event = utils.get_event(event_id, annotate=False)

        serializer = EventReportSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        report, created = EventReport.objects.update_or_create(
            event=event,
            defaults={'notes': serializer.validated_data['notes'], 'uploaded_by': request.user},
        )
        logger.info("Report for event %s %s", event.pk, 'uploaded' if created else 'replaced')

        return Response(
            {'report': EventReportSerializer(report).data},
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK
        )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_registrations(request):
    """Get the current user's registrations, upcoming or past"""
    registrations = utils.user_registrations(request.user, when=request.query_params.get('when'))
    return Response(MyRegistrationSerializer(registrations, many=True).data)


@api_view(['GET'])
@permission_classes([IsClubLeadership])
def export_participants(request, event_id):
    """Export participants to CSV"""
    event = utils.get_event(event_id, annotate=False)

    response = HttpResponse(content_type='text/csv')
    response['Content-Disposition'] = f'attachment; filename="participants-{event.pk}.csv"'
    utils.write_participants_csv(event, response)
    return response


@api_view(['GET'])
@permission_classes([IsClubLeadership])
def check_in_qr(request, event_id):
    """QR code carrying the check-in code, as PNG"""
    event = utils.get_event(event_id, annotate=False)

    png = utils.render_check_in_qr(event)
    response = HttpResponse(png, content_type='image/png')
    response['Content-Disposition'] = f'inline; filename="check-in-{event.pk}.png"'
    return response
