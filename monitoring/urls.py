# monitoring/urls.py
"""
URL configuration for the monitoring application.
"""

from django.urls import path
from .views import LogsView

# Application namespace for reverse lookups
app_name = "monitoring"

#: URL patterns for the monitoring application
urlpatterns = [
    # Display application logs (administrators only)
    path("monitoring/logs", LogsView.as_view(), name="logs"),
]
