"""
Contact serializers for Student Club Portal
"""
from rest_framework import serializers

from .models import ContactMessage


class ContactMessageSerializer(serializers.ModelSerializer):
    class Meta:
        model = ContactMessage
        fields = [
            'id', 'full_name', 'email', 'phone', 'title', 'subject',
            'message_body', 'is_read', 'created_at'
        ]
        read_only_fields = ['id', 'is_read', 'created_at']

    def validate_message_body(self, value):
        if len(value.strip()) < 10:
            raise serializers.ValidationError("Message must be at least 10 characters.")
        return value
