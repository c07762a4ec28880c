"""
Gallery utilities for Student Club Portal
"""
import logging
import uuid

from django.core.files.storage import default_storage

from .models import GalleryImage

logger = logging.getLogger(__name__)


def store_upload(uploaded_file):
    """Save the file through the storage backend and return its public URL path"""
    extension = uploaded_file.name.rsplit('.', 1)[-1].lower()
    name = default_storage.save(f'gallery/{uuid.uuid4().hex}.{extension}', uploaded_file)
    return default_storage.url(name)


def add_gallery_image(user, image_url, alt_text='', category=''):
    image = GalleryImage.objects.create(
        image_url=image_url,
        alt_text=alt_text,
        category=category,
        uploaded_by=user,
    )
    logger.info("Gallery image %s added by %s", image.pk, user.pk)
    return image
