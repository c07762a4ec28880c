"""
URL patterns for authentication app
"""
from django.urls import path
from . import views

app_name = 'authentication'

urlpatterns = [
    # Authentication endpoints
    path('register/', views.UserRegistrationView.as_view(), name='register'),
    path('login/', views.UserLoginView.as_view(), name='login'),
    path('logout/', views.UserLogoutView.as_view(), name='logout'),

    # Profile
    path('me/', views.current_user, name='current_user'),
    path('profile/', views.ProfileView.as_view(), name='profile'),
    path('committee-application/', views.CommitteeApplicationView.as_view(), name='committee_application'),
]
