# activiteiten/apps.py
"""
Application configuration for the activiteiten module.
"""

from django.apps import AppConfig


class ActiviteitenConfig(AppConfig):
    """
    Configuration class for the activiteiten application.

    Attributes
    ----------
    default_auto_field : str
        Type of primary key field for models that do not define one.
    name : str
        The full Python path to the application.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "activiteiten"
    verbose_name = "Activiteiten"
