# bewijsstukken/models.py
"""
Database models for the bewijsstukken application.

A Bewijsstuk is a file a student uploads to prove participation in
an activity. Files hang off the enrollment; the review workflow
itself lives on :class:`activiteiten.models.Inschrijving`.
"""

import os
import uuid

from django.db import models
from django.utils import timezone


def bewijs_upload_path(instance, filename: str) -> str:
    """
    Storage path of an uploaded proof.

    The stored name is random so two students uploading ``bewijs.pdf``
    never clash; the original name is kept in ``bestandsnaam``.
    """
    extension = os.path.splitext(filename)[1].lower()
    return f"bewijsstukken/{timezone.now():%Y/%m}/{uuid.uuid4().hex}{extension}"


class Bewijsstuk(models.Model):
    """
    Model representing an uploaded proof file.

    Attributes
    ----------
    inschrijving : ForeignKey
        Enrollment the proof belongs to.
    type : CharField
        Free text kind of proof, ``extra_bijlage`` by default.
    bestandsnaam : CharField
        Name of the file as uploaded.
    bestand : FileField
        The stored file.
    uploaded_at : DateTimeField
        Upload timestamp.
    """

    inschrijving = models.ForeignKey(
        "activiteiten.Inschrijving",
        on_delete=models.CASCADE,
        related_name="bewijsstukken",
        verbose_name="Inschrijving",
    )
    type = models.CharField("Type", max_length=50, default="extra_bijlage")
    bestandsnaam = models.CharField("Bestandsnaam", max_length=255)
    bestand = models.FileField("Bestand", upload_to=bewijs_upload_path)
    uploaded_at = models.DateTimeField("Geüpload op", auto_now_add=True)

    class Meta:
        ordering = ["-uploaded_at"]
        verbose_name = "bewijsstuk"
        verbose_name_plural = "bewijsstukken"

    def __str__(self) -> str:
        return self.bestandsnaam
