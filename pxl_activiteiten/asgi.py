# pxl_activiteiten/asgi.py
"""
ASGI config for the PXL Activiteiten project.

Exposes the ASGI callable as a module-level variable named
``application``, used by Daphne, Uvicorn or Hypercorn.
"""

import os
from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "pxl_activiteiten.settings")

#: The ASGI application callable used by ASGI servers
application = get_asgi_application()
