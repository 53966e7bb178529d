# monitoring/views.py
"""
Views for the monitoring application.

This module provides the administrative view for inspecting
the HTML application log.
"""

from django.http import HttpResponse

from accounts.roles import ADMIN_ONLY
from pxl_activiteiten.api import ApiView
from .html_logger import HEADER, log_file


class LogsView(ApiView):
    """
    Display the application log as HTML.

    Restricted to administrators; other callers receive the
    generic 401 answer of :class:`ApiView`.
    """

    allowed_roles = ADMIN_ONLY
    error_message = "Het logboek kan niet gelezen worden"

    def get(self, request):
        """
        Return the content of the log file.

        Returns
        -------
        HttpResponse
            The HTML log, or a placeholder page if nothing was
            logged yet.
        """
        path = log_file()
        if path.exists():
            html = path.read_text(encoding="utf-8")
        else:
            html = HEADER + "<p>Nog geen logregels.</p>"
        return HttpResponse(html, content_type="text/html; charset=utf-8")
