# pxl_activiteiten/wsgi.py
"""
WSGI config for the PXL Activiteiten project.

Exposes the WSGI callable as a module-level variable named
``application``, used by Gunicorn, uWSGI or ``runserver``.
"""

import os
from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "pxl_activiteiten.settings")

#: The WSGI application callable used by WSGI servers
application = get_wsgi_application()
