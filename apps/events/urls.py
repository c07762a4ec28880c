"""
URL patterns for events app
"""
from django.urls import path
from . import views

app_name = 'events'

urlpatterns = [
    # Event listings
    path('', views.EventListView.as_view(), name='event_list'),
    path('my-registrations/', views.my_registrations, name='my_registrations'),

    # Event details and management
    path('<uuid:event_id>/', views.EventDetailView.as_view(), name='event_detail'),
    path('<uuid:event_id>/report/', views.EventReportView.as_view(), name='event_report'),
    path('<uuid:event_id>/qr/', views.check_in_qr, name='event_qr'),

    # Registration and check-in
    path('<uuid:event_id>/register/', views.EventRegistrationView.as_view(), name='event_register'),
    path('<uuid:event_id>/check-in/', views.EventCheckInView.as_view(), name='event_check_in'),

    # Participants
    path('<uuid:event_id>/participants/', views.EventParticipantsView.as_view(), name='event_participants'),
    path('<uuid:event_id>/participants/export/', views.export_participants, name='export_participants'),
]
