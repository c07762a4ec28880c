"""
Team models for Student Club Portal
Named sub-groups of the club and their memberships
"""
from django.db import models
from django.conf import settings
import uuid


class TeamRole(models.TextChoices):
    LEADER = 'leader', 'Leader'
    MEMBER = 'member', 'Member'


class Team(models.Model):
    """A named sub-group of the club"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, unique=True)
    leader_title = models.CharField(max_length=100, blank=True)
    description = models.TextField(blank=True)
    handles_design_requests = models.BooleanField(
        default=False,
        help_text="Members of this team claim and deliver design requests"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'teams'
        verbose_name = 'Team'
        verbose_name_plural = 'Teams'
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def member_count(self):
        return self.memberships.count()

    @property
    def leaders(self):
        return self.memberships.filter(role_in_team=TeamRole.LEADER).select_related('user__profile')


class TeamMembership(models.Model):
    """Links a user to their single team"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='team_membership')
    team = models.ForeignKey(Team, on_delete=models.CASCADE, related_name='memberships')
    role_in_team = models.CharField(max_length=10, choices=TeamRole.choices, default=TeamRole.MEMBER)

    joined_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'team_members'
        verbose_name = 'Team Membership'
        verbose_name_plural = 'Team Memberships'
        indexes = [
            models.Index(fields=['team', 'role_in_team']),
        ]

    def __str__(self):
        return f"{self.user} - {self.team.name} ({self.role_in_team})"

    @property
    def is_leader(self):
        return self.role_in_team == TeamRole.LEADER
