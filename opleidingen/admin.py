# opleidingen/admin.py
"""
Admin configuration for the opleidingen application.
"""

from django.contrib import admin
from .models import DocentOpleiding, Opleiding


class DocentOpleidingInline(admin.TabularInline):
    """Docenten linked to a program, edited on the program page."""

    model = DocentOpleiding
    extra = 0
    autocomplete_fields = ("docent",)


@admin.register(Opleiding)
class OpleidingAdmin(admin.ModelAdmin):
    """
    Admin configuration for the Opleiding model.

    Attributes
    ----------
    list_display : tuple
        Fields displayed in the admin list view.
    list_filter : tuple
        Sidebar filters.
    search_fields : tuple
        Fields used by the search bar.
    """

    list_display = ("naam", "code", "actief", "auto_goedkeuring_student_activiteiten")
    list_filter = ("actief", "auto_goedkeuring_student_activiteiten")
    search_fields = ("naam", "code")
    inlines = [DocentOpleidingInline]


@admin.register(DocentOpleiding)
class DocentOpleidingAdmin(admin.ModelAdmin):
    list_display = ("docent", "opleiding", "is_coordinator")
    list_filter = ("opleiding", "is_coordinator")
    search_fields = ("docent__username", "docent__email", "opleiding__code")
