# accounts/models.py
"""
Database models for the accounts application.

This module defines the UserProfile model, which extends the
built-in Django user with the portal specific fields: display
name, role and home program.
"""

from django.conf import settings
from django.db import models

from .roles import Role


class UserProfile(models.Model):
    """
    Profile model linked to the Django user.

    The user's ``email`` is the login identifier and ``is_active`` is
    the portal's ``actief`` flag; both stay on the user model.

    Attributes
    ----------
    user : OneToOneField
        One-to-one relationship with ``settings.AUTH_USER_MODEL``.
    naam : CharField
        Display name.
    role : CharField
        One of :class:`accounts.roles.Role`.
    opleiding : ForeignKey
        Home program of a student. Always empty for docenten and
        administrators, who are linked through DocentOpleiding.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="profile",
    )
    naam = models.CharField("Naam", max_length=200, blank=True)
    role = models.CharField(
        "Rol", max_length=16, choices=Role.choices, default=Role.STUDENT
    )
    opleiding = models.ForeignKey(
        "opleidingen.Opleiding",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="studenten",
        verbose_name="Opleiding",
    )

    class Meta:
        ordering = ["naam"]
        verbose_name = "gebruikersprofiel"
        verbose_name_plural = "gebruikersprofielen"

    def __str__(self) -> str:
        return f"{self.naam or self.user} ({self.role})"
