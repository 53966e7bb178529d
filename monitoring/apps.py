# monitoring/apps.py
"""
Application configuration for the monitoring module.

The monitoring app owns the HTML application log and the
admin-only view that displays it.
"""

from django.apps import AppConfig


class MonitoringConfig(AppConfig):
    """
    Configuration class for the monitoring application.

    Attributes
    ----------
    default_auto_field : str
        Default primary key field type for models.
    name : str
        Full Python path to the monitoring application.
    verbose_name : str
        Human readable name shown in the admin.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "monitoring"
    verbose_name = "Monitoring"
