"""
Gallery serializers for Student Club Portal
"""
from rest_framework import serializers

from apps.common.serializers import ImageUploadSerializer
from .models import GalleryCategory, GalleryImage


class GalleryImageSerializer(serializers.ModelSerializer):
    class Meta:
        model = GalleryImage
        fields = ['id', 'image_url', 'alt_text', 'category', 'created_at']
        read_only_fields = ['id', 'created_at']


class GalleryUploadSerializer(ImageUploadSerializer):
    """Either an image file or an existing image URL"""

    file = serializers.ImageField(required=False)
    image_url = serializers.URLField(required=False)
    alt_text = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')
    category = serializers.ChoiceField(choices=GalleryCategory.choices, required=False, allow_blank=True, default='')

    def validate(self, attrs):
        if not attrs.get('file') and not attrs.get('image_url'):
            raise serializers.ValidationError('Provide an image file or an image URL.')
        return attrs
