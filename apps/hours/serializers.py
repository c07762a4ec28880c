"""
Hour request serializers for Student Club Portal
"""
from decimal import Decimal

from django.conf import settings
from rest_framework import serializers

from .models import HourRequest
from .utils import APPROVE, REJECT


class HourRequestSerializer(serializers.ModelSerializer):
    """Serializer for HourRequest model"""

    requester_name = serializers.SerializerMethodField()
    team_name = serializers.CharField(source='team.name', read_only=True, default=None)
    reviewed_by_name = serializers.SerializerMethodField()

    class Meta:
        model = HourRequest
        fields = [
            'id', 'user', 'requester_name', 'team', 'team_name',
            'activity_title', 'task_description', 'task_type', 'image_url',
            'status', 'awarded_hours', 'reviewed_by', 'reviewed_by_name',
            'reviewed_at', 'notes', 'created_at', 'updated_at'
        ]
        read_only_fields = fields

    def get_requester_name(self, obj):
        profile = getattr(obj.user, 'profile', None)
        return profile.full_name if profile else obj.user.email

    def get_reviewed_by_name(self, obj):
        if obj.reviewed_by is None:
            return None
        profile = getattr(obj.reviewed_by, 'profile', None)
        return profile.full_name if profile else obj.reviewed_by.email


class HourRequestCreateSerializer(serializers.Serializer):
    activity_title = serializers.CharField(max_length=200)
    task_description = serializers.CharField()
    task_type = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    image_url = serializers.URLField(required=False, allow_blank=True, default='')


class HourReviewSerializer(serializers.Serializer):
    """Decision on a pending request; hours are checked by the lifecycle"""

    decision = serializers.ChoiceField(choices=[APPROVE, REJECT])
    awarded_hours = serializers.DecimalField(max_digits=5, decimal_places=1, required=False, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True, default='')


class HourGrantSerializer(serializers.Serializer):
    member_id = serializers.UUIDField()
    task_description = serializers.CharField(min_length=10)
    hours = serializers.DecimalField(max_digits=5, decimal_places=1)
    activity_title = serializers.CharField(max_length=200, required=False, allow_blank=True)
    task_type = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')

    def validate_hours(self, value):
        if value < Decimal(settings.MIN_GRANTED_HOURS) or value > settings.MAX_AWARDED_HOURS:
            raise serializers.ValidationError(
                f"Hours must be between {settings.MIN_GRANTED_HOURS} and {settings.MAX_AWARDED_HOURS}."
            )
        return value


class GrantTargetSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    full_name = serializers.CharField()
    student_id = serializers.CharField()


class HourTotalsSerializer(serializers.Serializer):
    event_hours = serializers.FloatField()
    extra_hours = serializers.FloatField()
    total_hours = serializers.FloatField(source='total')
