"""
URL patterns for teams app
"""
from django.urls import path
from . import views

app_name = 'teams'

urlpatterns = [
    path('', views.TeamListView.as_view(), name='team_list'),
    path('leave/', views.LeaveTeamView.as_view(), name='leave'),
    path('my-team/members/', views.my_team_members, name='my_team_members'),
    path('memberships/<uuid:user_id>/role/', views.TeamRoleView.as_view(), name='set_role'),
    path('<uuid:team_id>/', views.TeamDetailView.as_view(), name='team_detail'),
    path('<uuid:team_id>/members/', views.TeamMembersView.as_view(), name='team_members'),
    path('<uuid:team_id>/join/', views.JoinTeamView.as_view(), name='join'),
]
