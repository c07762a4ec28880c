"""
URL patterns for gallery app
"""
from django.urls import path
from . import views

app_name = 'gallery'

urlpatterns = [
    path('', views.GalleryListView.as_view(), name='gallery_list'),
    path('upload/', views.GalleryUploadView.as_view(), name='gallery_upload'),
]
