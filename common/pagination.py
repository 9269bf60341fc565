"""
Pagination utilities for the project.

Defines the default page number pagination class used by list endpoints
such as the instructor's own sessions.  The question board itself is not
paginated: polling clients always receive the whole board.
"""
from rest_framework.pagination import PageNumberPagination


class DefaultPagination(PageNumberPagination):
    """A simple page number paginator with a default page size."""
    page_size = 20
    page_size_query_param = "page_size"
    max_page_size = 100
