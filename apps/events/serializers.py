"""
Event serializers for Student Club Portal
API serialization for events, registrations and reports
"""
from rest_framework import serializers

from .models import Event, EventRegistration, EventReport, RegistrationRole


class EventSerializer(serializers.ModelSerializer):
    """Serializer for Event model.

    The check-in code is only included when the view passes
    ``show_check_in_code`` in the context (club leadership).
    """

    registered_attendees = serializers.IntegerField(read_only=True, default=0)
    seats_left = serializers.SerializerMethodField()
    duration_hours = serializers.FloatField(read_only=True)

    class Meta:
        model = Event
        fields = [
            'id', 'title', 'description', 'location', 'category', 'image_url',
            'start_time', 'end_time', 'duration_hours', 'max_attendees',
            'registered_attendees', 'seats_left', 'check_in_code',
            'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'check_in_code', 'created_at', 'updated_at']

    def get_seats_left(self, obj):
        if obj.max_attendees is None:
            return None
        taken = getattr(obj, 'registered_attendees', None)
        if taken is None:
            taken = obj.registrations.count()
        return max(obj.max_attendees - taken, 0)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if not self.context.get('show_check_in_code'):
            data.pop('check_in_code', None)
        return data


class EventWriteSerializer(serializers.ModelSerializer):
    """Create and edit events (club leadership)"""

    class Meta:
        model = Event
        fields = [
            'title', 'description', 'location', 'category', 'image_url',
            'start_time', 'end_time', 'max_attendees', 'organizer_contact_link'
        ]

    def validate(self, attrs):
        start = attrs.get('start_time', getattr(self.instance, 'start_time', None))
        end = attrs.get('end_time', getattr(self.instance, 'end_time', None))
        if start and end and end <= start:
            raise serializers.ValidationError({'end_time': 'End time must be after start time.'})
        return attrs


class EventRegistrationCreateSerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=RegistrationRole.choices, default=RegistrationRole.ATTENDEE)


class CheckInSerializer(serializers.Serializer):
    code = serializers.CharField(max_length=20, allow_blank=True)


class EventRegistrationSerializer(serializers.ModelSerializer):
    """Participant row for club leadership"""

    user_id = serializers.UUIDField(source='user.id', read_only=True)
    email = serializers.EmailField(source='user.email', read_only=True)
    full_name = serializers.SerializerMethodField()
    student_id = serializers.SerializerMethodField()
    phone_number = serializers.SerializerMethodField()

    class Meta:
        model = EventRegistration
        fields = [
            'id', 'user_id', 'email', 'full_name', 'student_id', 'phone_number',
            'role', 'status', 'checked_in_at', 'created_at'
        ]
        read_only_fields = fields

    def _profile_value(self, obj, name):
        profile = getattr(obj.user, 'profile', None)
        return getattr(profile, name, '') if profile else ''

    def get_full_name(self, obj):
        return self._profile_value(obj, 'full_name')

    def get_student_id(self, obj):
        return self._profile_value(obj, 'student_id')

    def get_phone_number(self, obj):
        return self._profile_value(obj, 'phone_number')


class MyRegistrationSerializer(serializers.ModelSerializer):
    """A member's own registration with the event summary"""

    event_id = serializers.UUIDField(source='event.id', read_only=True)
    event_title = serializers.CharField(source='event.title', read_only=True)
    start_time = serializers.DateTimeField(source='event.start_time', read_only=True)
    end_time = serializers.DateTimeField(source='event.end_time', read_only=True)
    location = serializers.CharField(source='event.location', read_only=True)

    class Meta:
        model = EventRegistration
        fields = [
            'id', 'event_id', 'event_title', 'start_time', 'end_time', 'location',
            'role', 'status', 'checked_in_at', 'created_at'
        ]
        read_only_fields = fields


class EventReportSerializer(serializers.ModelSerializer):
    uploaded_by_email = serializers.EmailField(source='uploaded_by.email', read_only=True, default=None)

    class Meta:
        model = EventReport
        fields = ['id', 'event', 'notes', 'uploaded_by', 'uploaded_by_email', 'created_at']
        read_only_fields = ['id', 'event', 'uploaded_by', 'uploaded_by_email', 'created_at']
