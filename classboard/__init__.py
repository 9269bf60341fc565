"""
Project package for the classroom Q&A board backend.

Holds the split settings, the root URL configuration and the ASGI/WSGI
entry points.  Domain logic lives in the `classes`, `questions` and
`analytics` apps.
"""
