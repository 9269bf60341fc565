from django.conf import settings
from django.shortcuts import redirect


def index(request):
    # The board UI is a separate SPA; the API root just hands off to it.
    return redirect(settings.FRONTEND_URL)
