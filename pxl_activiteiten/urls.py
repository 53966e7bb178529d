# pxl_activiteiten/urls.py
"""
Root URL configuration for the PXL Activiteiten project.

This module defines the global URL routes and delegates to the
application-specific ``urls.py`` modules. Every application mounts
its JSON endpoints at the root; the role prefix (``admin/``,
``docent/``, ``student/``) is part of the application routes. It
also serves media files in development mode.

For more details, see:
https://docs.djangoproject.com/en/stable/topics/http/urls/
"""

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

#: Global URL patterns for the project
urlpatterns = [
    # Django admin interface, kept apart from the admin/ JSON routes
    path("django-admin/", admin.site.urls),

    # Accounts application (authentication, user management)
    path("", include("accounts.urls")),

    # Opleidingen application (programs and docent links)
    path("", include("opleidingen.urls")),

    # Activiteiten application (activities, requests, enrollments, scorekaart)
    path("", include("activiteiten.urls")),

    # Bewijsstukken application (proof files and their review)
    path("", include("bewijsstukken.urls")),

    # Monitoring application (application log)
    path("", include("monitoring.urls")),
]

# Serve uploaded proofs during development (not recommended in production)
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
