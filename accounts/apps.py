# accounts/apps.py
"""
Application configuration for the accounts module.
"""

from django.apps import AppConfig


class AccountsConfig(AppConfig):
    """
    Configuration class for the accounts application.

    Attributes
    ----------
    default_auto_field : str
        The default type for auto-created primary key fields.
    name : str
        The full Python path to the application.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "accounts"
    verbose_name = "Gebruikers"

    def ready(self) -> None:
        """Import signals to register the profile handlers."""
        from . import signals  # noqa: F401
