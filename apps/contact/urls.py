"""
URL patterns for contact app
"""
from django.urls import path
from . import views

app_name = 'contact'

urlpatterns = [
    path('', views.ContactMessageCreateView.as_view(), name='contact_create'),
    path('messages/', views.ContactMessageListView.as_view(), name='message_list'),
    path('messages/<uuid:message_id>/read/', views.MarkMessageReadView.as_view(), name='mark_read'),
]
