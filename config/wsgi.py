"""WSGI entrypoint for the course platform."""
import os

from django.core.wsgi import get_wsgi_application

# Production settings unless the environment says otherwise.
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.prod")

application = get_wsgi_application()
