# activiteiten/admin.py
"""
Admin configuration for the activiteiten application.

This module defines Django admin customizations for the
:class:`Activiteit` and :class:`Inschrijving` models.
"""

from django.contrib import admin
from .models import Activiteit, Inschrijving


@admin.register(Activiteit)
class ActiviteitAdmin(admin.ModelAdmin):
    """
    Admin configuration for the Activiteit model.

    Provides list display, filters, and search options for
    Activiteit records in the Django admin interface.
    """
    # Fields displayed in the admin list view
    list_display = ("titel", "datum", "status", "type_aanvraag", "opleiding", "aangemaakt_door")
    # Filters available in the right sidebar
    list_filter = ("status", "type_aanvraag", "opleiding")
    # Fields available for the admin search bar
    search_fields = ("titel", "type_activiteit", "locatie")
    date_hierarchy = "datum"


@admin.register(Inschrijving)
class InschrijvingAdmin(admin.ModelAdmin):
    """
    Admin configuration for the Inschrijving model.
    """
    list_display = ("student", "activiteit", "inschrijvingsstatus", "effectieve_deelname", "bewijs_status")
    list_filter = ("inschrijvingsstatus", "bewijs_status")
    search_fields = ("student__email", "student__profile__naam", "activiteit__titel")
    list_select_related = ("student", "activiteit")
