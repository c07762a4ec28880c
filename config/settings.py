"""
Django settings for Student Club Portal
"""
import os

# Environment-specific settings
if os.environ.get('ENVIRONMENT', 'development') == 'production':
    from .production import *
else:
    from .development import *
