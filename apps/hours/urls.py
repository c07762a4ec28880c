"""
URL patterns for hours app
"""
from django.urls import path
from . import views

app_name = 'hours'

urlpatterns = [
    # Member submissions
    path('requests/', views.MyHourRequestsView.as_view(), name='my_requests'),
    path('totals/', views.my_hour_totals, name='my_totals'),

    # Leadership review
    path('review/pending/', views.PendingReviewView.as_view(), name='review_pending'),
    path('review/archive/', views.ReviewArchiveView.as_view(), name='review_archive'),
    path('review/<uuid:request_id>/', views.ReviewHourRequestView.as_view(), name='review'),
    path('grant/', views.GrantHoursView.as_view(), name='grant'),
    path('leaderboard/', views.hours_leaderboard, name='leaderboard'),
]
