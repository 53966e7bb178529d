# bewijsstukken/admin.py
"""
Admin configuration for the bewijsstukken application.
"""

from django.contrib import admin
from .models import Bewijsstuk


@admin.register(Bewijsstuk)
class BewijsstukAdmin(admin.ModelAdmin):
    """
    Admin configuration for the Bewijsstuk model.

    Lists the uploaded files with their enrollment and upload date.
    """
    list_display = ("bestandsnaam", "type", "inschrijving", "uploaded_at")
    list_filter = ("type",)
    search_fields = ("bestandsnaam", "inschrijving__activiteit__titel", "inschrijving__student__email")
    raw_id_fields = ("inschrijving",)
