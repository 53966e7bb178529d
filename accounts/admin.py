# accounts/admin.py
"""
Admin configuration for the accounts application.

This module customizes the Django admin interface for the
:class:`UserProfile` model.
"""

from django.contrib import admin
from .models import UserProfile


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    """
    Admin configuration for the UserProfile model.

    Attributes
    ----------
    list_display : tuple
        Fields shown in the admin list view.
    list_filter : tuple
        Sidebar filters on role and program.
    search_fields : tuple
        Search on name, username and email.
    """

    list_display = ("naam", "user", "role", "opleiding")
    list_filter = ("role", "opleiding")
    search_fields = ("naam", "user__username", "user__email")
    list_select_related = ("user", "opleiding")
