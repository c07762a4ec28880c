"""
Common serializers for Student Club Portal
"""
from rest_framework import serializers

ALLOWED_IMAGE_EXTENSIONS = ['jpg', 'jpeg', 'png', 'gif', 'webp']
MAX_UPLOAD_SIZE = 5 * 1024 * 1024


class ImageUploadSerializer(serializers.Serializer):
    """Serializer for image uploads"""

    file = serializers.ImageField()

    def validate_file(self, value):
        """Validate uploaded file"""
        if value.size > MAX_UPLOAD_SIZE:
            raise serializers.ValidationError("File size cannot exceed 5MB")

        extension = value.name.split('.')[-1].lower()

        if extension not in ALLOWED_IMAGE_EXTENSIONS:
            raise serializers.ValidationError(
                f"File extension '{extension}' not allowed. "
                f"Allowed extensions: {', '.join(ALLOWED_IMAGE_EXTENSIONS)}"
            )

        return value
