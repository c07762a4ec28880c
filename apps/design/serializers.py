"""
Design request serializers for Student Club Portal
"""
from rest_framework import serializers

from .models import DesignRequest


def _display_name(user):
    if user is None:
        return None
    profile = getattr(user, 'profile', None)
    return profile.full_name if profile else user.email


class DesignRequestSerializer(serializers.ModelSerializer):
    """Serializer for DesignRequest model"""

    requester_name = serializers.SerializerMethodField()
    assigned_to_name = serializers.SerializerMethodField()

    class Meta:
        model = DesignRequest
        fields = [
            'id', 'user', 'requester_name', 'title', 'design_type', 'description',
            'deadline', 'status', 'assigned_to', 'assigned_to_name', 'design_url',
            'feedback_notes', 'created_at', 'updated_at'
        ]
        read_only_fields = fields

    def get_requester_name(self, obj):
        return _display_name(obj.user)

    def get_assigned_to_name(self, obj):
        return _display_name(obj.assigned_to)


class DesignRequestCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=200)
    design_type = serializers.CharField(max_length=100)
    description = serializers.CharField()
    deadline = serializers.DateField(required=False, allow_null=True)


class DeliverableSerializer(serializers.Serializer):
    design_url = serializers.URLField()


class DesignRejectSerializer(serializers.Serializer):
    feedback_notes = serializers.CharField(allow_blank=True)
