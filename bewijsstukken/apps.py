# bewijsstukken/apps.py
"""
Application configuration for the bewijsstukken module.

This module defines the Django application configuration
for the proof-of-participation files.
"""

from django.apps import AppConfig


class BewijsstukkenConfig(AppConfig):
    """
    Configuration class for the bewijsstukken application.

    Attributes
    ----------
    default_auto_field : str
        Type of primary key field for models that do not define one.
    name : str
        The full Python path to the application.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "bewijsstukken"
    verbose_name = "Bewijsstukken"
