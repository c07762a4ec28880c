"""
URL patterns for design app
"""
from django.urls import path
from . import views

app_name = 'design'

urlpatterns = [
    path('', views.MyDesignRequestsView.as_view(), name='my_requests'),
    path('queue/', views.design_queue, name='queue'),
    path('<uuid:request_id>/claim/', views.ClaimDesignRequestView.as_view(), name='claim'),
    path('<uuid:request_id>/deliver/', views.DeliverDesignView.as_view(), name='deliver'),
    path('<uuid:request_id>/accept/', views.AcceptDesignView.as_view(), name='accept'),
    path('<uuid:request_id>/reject/', views.RejectDesignView.as_view(), name='reject'),
]
