"""
Authentication serializers for Student Club Portal
API serialization for registration, login, profiles and committee applications
"""
from rest_framework import serializers
from django.contrib.auth import authenticate
from django.contrib.auth.password_validation import validate_password

from apps.events.serializers import MyRegistrationSerializer
from .models import ClubApplication, Profile, User


class ProfileSerializer(serializers.ModelSerializer):
    """Serializer for Profile model"""

    id = serializers.UUIDField(source='user_id', read_only=True)
    email = serializers.EmailField(source='user.email', read_only=True)

    class Meta:
        model = Profile
        fields = [
            'id', 'email', 'full_name', 'student_id', 'college', 'major',
            'phone_number', 'avatar_url', 'club_role', 'committee',
            'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'email', 'club_role', 'committee', 'created_at', 'updated_at']


class ProfileUpdateSerializer(serializers.ModelSerializer):
    """Self-edit of the profile; club role and committee are not editable here"""

    class Meta:
        model = Profile
        fields = ['full_name', 'student_id', 'college', 'major', 'phone_number', 'avatar_url']
        extra_kwargs = {'full_name': {'required': True}}


class UserRegistrationSerializer(serializers.Serializer):
    """Serializer for member registration"""

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, validators=[validate_password])
    password_confirm = serializers.CharField(write_only=True)

    full_name = serializers.CharField(max_length=150)
    student_id = serializers.CharField(max_length=50, required=False, allow_blank=True, default='')
    college = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')
    major = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')
    phone_number = serializers.CharField(max_length=20, required=False, allow_blank=True, default='')

    self_introduction = serializers.CharField(required=False, allow_blank=True, default='')
    joining_reason = serializers.CharField(required=False, allow_blank=True, default='')
    skills = serializers.CharField(required=False, allow_blank=True, default='')
    previous_experience = serializers.CharField(required=False, allow_blank=True, default='')

    PROFILE_FIELDS = ['full_name', 'student_id', 'college', 'major', 'phone_number']
    APPLICATION_FIELDS = ['self_introduction', 'joining_reason', 'skills', 'previous_experience']

    def validate_email(self, value):
        value = User.objects.normalize_email(value)
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("User with this email already exists.")
        return value

    def validate(self, attrs):
        """Cross-field validation"""
        if attrs['password'] != attrs.pop('password_confirm'):
            raise serializers.ValidationError("Password confirmation doesn't match.")
        return attrs

    def split(self):
        data = self.validated_data
        profile_data = {name: data[name] for name in self.PROFILE_FIELDS}
        application_data = {name: data[name] for name in self.APPLICATION_FIELDS}
        return data['email'], data['password'], profile_data, application_data


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login"""

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)

    def validate(self, attrs):
        """Authenticate user credentials"""
        user = authenticate(
            request=self.context.get('request'),
            username=attrs.get('email'),
            password=attrs.get('password')
        )

        if not user:
            raise serializers.ValidationError('Invalid email or password.', code='authorization')

        if not user.is_active:
            raise serializers.ValidationError('User account is disabled.', code='authorization')

        attrs['user'] = user
        return attrs


class CommitteeApplicationSerializer(serializers.ModelSerializer):
    class Meta:
        model = ClubApplication
        fields = [
            'preferred_committee', 'event_idea', 'interested_in_specific_event',
            'self_introduction', 'joining_reason', 'skills', 'previous_experience',
            'updated_at'
        ]
        read_only_fields = [
            'self_introduction', 'joining_reason', 'skills', 'previous_experience', 'updated_at'
        ]
        extra_kwargs = {'preferred_committee': {'required': True, 'allow_blank': False}}


class TeamInfoSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    leader_title = serializers.CharField()
    role_in_team = serializers.CharField()


class ProfileBundleSerializer(serializers.Serializer):
    """Everything the profile page renders"""

    profile_complete = serializers.BooleanField()
    profile = ProfileSerializer()
    team = TeamInfoSerializer(allow_null=True)
    registrations = MyRegistrationSerializer(many=True)
    hours_visible = serializers.BooleanField()
    hours = serializers.SerializerMethodField()
    permission_groups = serializers.SerializerMethodField()
    review_visibility = serializers.SerializerMethodField()

    def get_hours(self, bundle):
        if not bundle.hours_visible:
            return None
        return {
            'event_hours': bundle.event_hours,
            'extra_hours': bundle.extra_hours,
            'total_hours': bundle.total_hours,
        }

    def get_permission_groups(self, bundle):
        order = ['general', 'team_leadership', 'club_leadership']
        names = {group.value for group in bundle.scope.groups}
        return [name for name in order if name in names]

    def get_review_visibility(self, bundle):
        return bundle.scope.review_visibility.value
