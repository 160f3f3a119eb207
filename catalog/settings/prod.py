"""
Production settings for catalog project.
"""

from .base import *

DEBUG = os.getenv('DEBUG', 'False').lower() in ('true', '1', 'yes')

# Keep database connections open between requests
DATABASES['default']['CONN_MAX_AGE'] = int(os.getenv('DB_CONN_MAX_AGE', '600'))

SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = 'DENY'
