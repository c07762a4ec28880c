"""
Authentication models for Student Club Portal
Principals, club profiles and membership applications
"""
from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.conf import settings
from django.db import models
import uuid


class CustomUserManager(BaseUserManager):
    """Custom user manager for email-based authentication"""

    def create_user(self, email, password=None, **extra_fields):
        """Create and return a regular user with an email and password"""
        if not email:
            raise ValueError('The Email field must be set')

        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        """Create and return a superuser with an email and password"""
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True.')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True.')

        return self.create_user(email, password, **extra_fields)


class User(AbstractUser):
    """Authenticated principal, identified by email"""

    # Override username field - we'll use email instead
    username = None
    email = models.EmailField(unique=True)

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    objects = CustomUserManager()

    class Meta:
        db_table = 'auth_users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'
        ordering = ['email']

    def __str__(self):
        return self.email


class ClubRole(models.TextChoices):
    MEMBER = 'member', 'Member'
    CLUB_LEADER = 'club_leader', 'Club Leader'
    CLUB_DEPUTY = 'club_deputy', 'Club Deputy'
    CLUB_SUPERVISOR = 'club_supervisor', 'Club Supervisor'


class Profile(models.Model):
    """Club profile, one per principal. Absent until registration completes."""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        primary_key=True,
        related_name='profile'
    )
    full_name = models.CharField(max_length=150)
    student_id = models.CharField(max_length=50, blank=True)
    college = models.CharField(max_length=200, blank=True)
    major = models.CharField(max_length=200, blank=True)
    phone_number = models.CharField(max_length=20, blank=True)
    avatar_url = models.URLField(blank=True)

    club_role = models.CharField(max_length=20, choices=ClubRole.choices, default=ClubRole.MEMBER)
    committee = models.CharField(max_length=100, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'profiles'
        verbose_name = 'Profile'
        verbose_name_plural = 'Profiles'
        ordering = ['full_name']
        indexes = [
            models.Index(fields=['club_role']),
        ]

    def __str__(self):
        return self.full_name or str(self.user_id)

    @property
    def id(self):
        return self.user_id

    @property
    def email(self):
        return self.user.email


class ClubApplication(models.Model):
    """Membership application filled at registration and by the committee form"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='club_application')

    self_introduction = models.TextField(blank=True)
    joining_reason = models.TextField(blank=True)
    skills = models.TextField(blank=True)
    previous_experience = models.TextField(blank=True)

    # Committee application
    preferred_committee = models.CharField(max_length=100, blank=True)
    event_idea = models.TextField(blank=True)
    interested_in_specific_event = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'club_applications'
        verbose_name = 'Club Application'
        verbose_name_plural = 'Club Applications'
        ordering = ['-created_at']

    def __str__(self):
        return f"Application of {self.user}"
