# opleidingen/apps.py
"""
Application configuration for the opleidingen module.

This module defines the Django application configuration
for the programs (opleidingen) app.
"""

from django.apps import AppConfig


class OpleidingenConfig(AppConfig):
    """
    Configuration class for the opleidingen application.

    Attributes
    ----------
    default_auto_field : str
        Type of primary key field for models that do not define one.
    name : str
        The full Python path to the application.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "opleidingen"
    verbose_name = "Opleidingen"
