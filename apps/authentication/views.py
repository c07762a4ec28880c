"""
Authentication views for Student Club Portal
API views for registration, login, the profile page and committee applications
"""
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework.authtoken.models import Token
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated, AllowAny
from django.contrib.auth import logout

from apps.common.exceptions import ValidationFailed
from apps.common.permissions import HasProfile
from .models import ClubApplication, Profile
from .serializers import (
    CommitteeApplicationSerializer, ProfileBundleSerializer, ProfileSerializer,
    ProfileUpdateSerializer, UserLoginSerializer, UserRegistrationSerializer
)
from .utils import load_profile_bundle, register_member, submit_committee_application


class UserRegistrationView(APIView):
    """Member registration endpoint"""

    permission_classes = [AllowAny]

    def post(self, request):
        serializer = UserRegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        email, password, profile_data, application_data = serializer.split()
        user, profile = register_member(email, password, profile_data, application_data)

        token, created = Token.objects.get_or_create(user=user)

        return Response({
            'message': 'Registration successful.',
            'profile': ProfileSerializer(profile).data,
            'token': token.key,
            'token_type': 'Token'
        }, status=status.HTTP_201_CREATED)


class UserLoginView(APIView):
    """User login endpoint"""

    permission_classes = [AllowAny]

    def post(self, request):
        serializer = UserLoginSerializer(data=request.data, context={'request': request})
        serializer.is_valid(raise_exception=True)

        user = serializer.validated_data['user']
        token, created = Token.objects.get_or_create(user=user)

        return Response({
            'message': 'Login successful',
            'token': token.key,
            'token_type': 'Token',
            'profile_complete': Profile.objects.filter(user=user).exists()
        }, status=status.HTTP_200_OK)


class UserLogoutView(APIView):
    """User logout endpoint"""

    permission_classes = [IsAuthenticated]

    def post(self, request):
        Token.objects.filter(user=request.user).delete()
        logout(request)
        return Response({
            'message': 'Successfully logged out'
        }, status=status.HTTP_200_OK)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def current_user(request):
    """Profile bundle of the current user"""
    bundle = load_profile_bundle(request.user)
    if not bundle.profile_complete:
        return Response({'profile_complete': False})
    return Response(ProfileBundleSerializer(bundle).data)


class ProfileView(APIView):
    """Read and self-edit the caller's profile; PUT completes a missing one"""

    permission_classes = [IsAuthenticated]

    def get(self, request):
        profile = Profile.objects.filter(user=request.user).first()
        if profile is None:
            return Response({'profile_complete': False})
        return Response(ProfileSerializer(profile).data)

    def put(self, request):
        profile = Profile.objects.filter(user=request.user).first()
        serializer = ProfileUpdateSerializer(profile, data=request.data)
        serializer.is_valid(raise_exception=True)

        if profile is None:
            profile = serializer.save(user=request.user)
            code = status.HTTP_201_CREATED
        else:
            profile = serializer.save()
            code = status.HTTP_200_OK

        return Response(ProfileSerializer(profile).data, status=code)

    def patch(self, request):
        profile = Profile.objects.filter(user=request.user).first()
        if profile is None:
            raise ValidationFailed('Complete your profile first.')

        serializer = ProfileUpdateSerializer(profile, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        profile = serializer.save()
        return Response(ProfileSerializer(profile).data)


class CommitteeApplicationView(APIView):
    """Committee application of the current member"""

    permission_classes = [IsAuthenticated, HasProfile]

    def get(self, request):
        application = ClubApplication.objects.filter(user=request.user).first()
        if application is None:
            return Response({'preferred_committee': None})
        return Response(CommitteeApplicationSerializer(application).data)

    def post(self, request):
        serializer = CommitteeApplicationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        application = submit_committee_application(request.user, **serializer.validated_data)

        return Response({
            'message': 'Your committee application has been submitted.',
            'application': CommitteeApplicationSerializer(application).data
        }, status=status.HTTP_200_OK)
