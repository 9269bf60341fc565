"""
ASGI entry point for the classroom Q&A board.

The board is served over plain HTTP (clients poll the question list), so
only the Django ASGI application is mounted.  The default settings module
is the development configuration.
"""

import os

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "classboard.settings.dev")

from django.conf import settings
from django.core.asgi import get_asgi_application
from django.contrib.staticfiles.handlers import ASGIStaticFilesHandler

application = get_asgi_application()

# Serve /static/ when using uvicorn in DEBUG mode
if settings.DEBUG:
    application = ASGIStaticFilesHandler(application)
