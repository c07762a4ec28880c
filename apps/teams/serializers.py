"""
Team serializers for Student Club Portal
"""
from rest_framework import serializers

from .models import Team, TeamMembership, TeamRole


class TeamSerializer(serializers.ModelSerializer):
    """Serializer for Team model"""

    member_count = serializers.SerializerMethodField()

    class Meta:
        model = Team
        fields = [
            'id', 'name', 'leader_title', 'description',
            'handles_design_requests', 'member_count', 'created_at'
        ]
        read_only_fields = ['id', 'member_count', 'created_at']

    def get_member_count(self, obj):
        count = getattr(obj, 'num_members', None)
        return count if count is not None else obj.member_count


class TeamMembershipSerializer(serializers.ModelSerializer):
    """Serializer for TeamMembership model"""

    user_id = serializers.UUIDField(source='user.id', read_only=True)
    full_name = serializers.SerializerMethodField()
    student_id = serializers.SerializerMethodField()
    team_name = serializers.CharField(source='team.name', read_only=True)

    class Meta:
        model = TeamMembership
        fields = ['id', 'user_id', 'full_name', 'student_id', 'team', 'team_name', 'role_in_team', 'joined_at']
        read_only_fields = fields

    def _profile(self, obj):
        return getattr(obj.user, 'profile', None)

    def get_full_name(self, obj):
        profile = self._profile(obj)
        return profile.full_name if profile else ''

    def get_student_id(self, obj):
        profile = self._profile(obj)
        return profile.student_id if profile else ''


class TeamRoleSerializer(serializers.Serializer):
    role_in_team = serializers.ChoiceField(choices=TeamRole.choices)
