"""
Client for the external image host.

The host speaks the ImgBB upload API: the raw image is posted as the
``image`` form field and the public URL comes back under ``data.url``.
"""
import logging

import requests
from django.conf import settings

from .exceptions import ImageUploadError

logger = logging.getLogger(__name__)


class ImageHostClient:
    """Uploads product images and returns their public URLs."""

    def __init__(self, url=None, api_key=None, timeout=None):
        """
        Initialize the client.

        Args:
            url: Upload endpoint; defaults to settings.IMAGE_HOST['URL']
            api_key: API key; defaults to settings.IMAGE_HOST['API_KEY']
            timeout: Request timeout in seconds
        """
        config = getattr(settings, 'IMAGE_HOST', {})
        self.url = url or config.get('URL', '')
        self.api_key = api_key if api_key is not None else config.get('API_KEY', '')
        self.timeout = timeout or config.get('TIMEOUT', 30)

    @property
    def is_configured(self):
        return bool(self.url and self.api_key)

    def upload(self, image_file, filename=None):
        """
        Upload an image file and return its public URL.

        Args:
            image_file: File-like object (e.g. an UploadedFile)
            filename: Name sent to the image host

        Returns:
            Public URL of the uploaded image

        Raises:
            ImageUploadError: If the host is not configured, unreachable,
                or reports a failure
        """
        if not self.is_configured:
            logger.warning("Image host API key not configured - rejecting upload")
            raise ImageUploadError("Image host is not configured")

        filename = filename or getattr(image_file, 'name', None) or 'image'
        try:
            response = requests.post(
                self.url,
                params={'key': self.api_key},
                files={'image': (filename, image_file)},
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            logger.error(f"Image upload to {self.url} failed: {str(e)}")
            raise ImageUploadError("Image upload failed") from e
        except ValueError as e:
            logger.error(f"Image host returned a non-JSON response: {str(e)}")
            raise ImageUploadError("Image upload failed") from e

        image_url = None
        if isinstance(payload, dict) and payload.get('success'):
            image_url = (payload.get('data') or {}).get('url')
        if not image_url:
            logger.error(f"Image host reported failure: {payload}")
            raise ImageUploadError("Image upload failed")

        logger.info("Uploaded image %s to %s", filename, image_url)
        return image_url
