"""
Shared DRF permission classes.

Ownership of a class session is checked inside the services so that every
mutating operation applies the same rule; views only make sure a principal
is present before a write reaches them.
"""
from rest_framework.permissions import BasePermission, SAFE_METHODS


class IsAuthenticatedForWrites(BasePermission):
    """
    - SAFE_METHODS (GET/HEAD/OPTIONS) are open, students read anonymously.
    - Everything else requires an authenticated instructor.
    """

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        return bool(request.user and request.user.is_authenticated)
