"""
Gallery views for Student Club Portal
"""
from rest_framework import generics, status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.permissions import IsClubLeadership
from .models import GalleryImage
from .serializers import GalleryImageSerializer, GalleryUploadSerializer
from . import utils


class GalleryListView(generics.ListAPIView):
    """Public gallery, filterable by category"""

    serializer_class = GalleryImageSerializer
    permission_classes = [AllowAny]

    def get_queryset(self):
        queryset = GalleryImage.objects.all()
        category = self.request.query_params.get('category')
        if category:
            queryset = queryset.filter(category=category)
        return queryset


class GalleryUploadView(APIView):
    """Club leadership adds an image by upload or by URL"""

    permission_classes = [IsClubLeadership]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def post(self, request):
        serializer = GalleryUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        image_url = data.get('image_url')
        if data.get('file'):
            image_url = request.build_absolute_uri(utils.store_upload(data['file']))

        image = utils.add_gallery_image(
            request.user,
            image_url,
            alt_text=data.get('alt_text', ''),
            category=data.get('category', ''),
        )
        return Response(GalleryImageSerializer(image).data, status=status.HTTP_201_CREATED)
