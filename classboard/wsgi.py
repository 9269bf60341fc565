"""WSGI entry point for the classroom Q&A board."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "classboard.settings.dev")

application = get_wsgi_application()
