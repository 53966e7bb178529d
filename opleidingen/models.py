# opleidingen/models.py
"""
Database models for the opleidingen application.

This module defines the Opleiding (program) model and the
DocentOpleiding association linking docenten to programs.
Students point to their home program through
:attr:`accounts.models.UserProfile.opleiding`.
"""

from django.conf import settings
from django.db import models


class Opleiding(models.Model):
    """
    Model representing an academic program.

    Attributes
    ----------
    naam : CharField
        Display name of the program.
    code : CharField
        Short unique code, e.g. ``BOUW``.
    beschrijving : TextField
        Optional description.
    actief : BooleanField
        Whether the program is still offered.
    auto_goedkeuring_student_activiteiten : BooleanField
        When set, activity requests of students of this program are
        approved on creation instead of waiting for a docent review.
    created_at : DateTimeField
        Creation timestamp.
    """

    naam = models.CharField("Naam", max_length=200)
    code = models.CharField(
        "Code",
        max_length=32,
        unique=True,
        error_messages={"unique": "Deze code is al in gebruik"},
    )
    beschrijving = models.TextField("Beschrijving", blank=True)
    actief = models.BooleanField("Actief", default=True)
    auto_goedkeuring_student_activiteiten = models.BooleanField(
        "Automatische goedkeuring van studentaanvragen", default=False
    )
    created_at = models.DateTimeField("Aangemaakt op", auto_now_add=True)

    class Meta:
        ordering = ["naam"]
        verbose_name = "opleiding"
        verbose_name_plural = "opleidingen"

    def __str__(self) -> str:
        return f"{self.naam} ({self.code})"


class DocentOpleiding(models.Model):
    """
    Association row linking a docent to a program.

    A docent may be linked to zero or more programs. Zero links is
    read by :func:`opleidingen.scope.resolve_program_scope` as
    "unrestricted".

    Attributes
    ----------
    docent : ForeignKey
        The docent user.
    opleiding : ForeignKey
        The linked program.
    is_coordinator : BooleanField
        Marks the docent as coordinator of the program.
    """

    docent = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="docent_opleidingen",
        verbose_name="Docent",
    )
    opleiding = models.ForeignKey(
        Opleiding,
        on_delete=models.CASCADE,
        related_name="docent_koppelingen",
        verbose_name="Opleiding",
    )
    is_coordinator = models.BooleanField("Coördinator", default=False)

    class Meta:
        unique_together = ("docent", "opleiding")
        verbose_name = "docent-opleiding"
        verbose_name_plural = "docent-opleidingen"

    def __str__(self) -> str:
        return f"{self.docent} -> {self.opleiding.code}"
