# activiteiten/models.py
"""
Database models for the activiteiten application.

This module defines the Activiteit and Inschrijving models.
An Activiteit is either published by a docent or administrator
(``type_aanvraag = docent``) or requested by a student who took part
in an external activity (``type_aanvraag = student``). An
Inschrijving links a student to an activity and carries the
proof-of-participation workflow.
"""

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.db.models import Q

from .uren import bereken_uren


class Activiteit(models.Model):
    """
    Model representing an activity.

    Attributes
    ----------
    titel : CharField
        Title of the activity.
    type_activiteit : CharField
        Free text category (workshop, lezing, ...).
    datum : DateField
        Scheduled date.
    startuur, einduur : TimeField
        Start and end time; their difference gives the hours
        credited on the scorekaart.
    max_plaatsen : PositiveIntegerField
        Optional capacity.
    aantal_ingeschreven : PositiveIntegerField
        Number of active enrollments.
    niveau : PositiveSmallIntegerField
        Level 1 to 5 the hours count towards.
    status : CharField
        Lifecycle status, one of :class:`Activiteit.Status`.
    type_aanvraag : CharField
        Who created the activity, see :class:`Activiteit.TypeAanvraag`.
    opmerkingen : TextField
        Remarks of the reviewer.
    afgekeurd_bekeken_op : DateTimeField
        When the owner acknowledged a rejection; empty while the
        rejection is unread.
    aangemaakt_door : ForeignKey
        Creator and owner of the activity.
    opleiding : ForeignKey
        Program the activity belongs to, if any.
    """

    class Status(models.TextChoices):
        """
        Enumeration of activity statuses.

        Any status may follow any other; only membership of this
        set is enforced.
        """

        CONCEPT = "concept", "Concept"
        GEPUBLICEERD = "gepubliceerd", "Gepubliceerd"
        IN_REVIEW = "in_review", "In review"
        GOEDGEKEURD = "goedgekeurd", "Goedgekeurd"
        AFGEKEURD = "afgekeurd", "Afgekeurd"
        AFGEROND = "afgerond", "Afgerond"

    class TypeAanvraag(models.TextChoices):
        STUDENT = "student", "Aanvraag van een student"
        DOCENT = "docent", "Aangeboden door een docent"

    titel = models.CharField("Titel", max_length=200)
    type_activiteit = models.CharField("Type activiteit", max_length=100)
    aard = models.CharField("Aard", max_length=100, blank=True)
    omschrijving = models.TextField("Omschrijving", blank=True)
    datum = models.DateField("Datum")
    startuur = models.TimeField("Startuur")
    einduur = models.TimeField("Einduur")
    locatie = models.CharField("Locatie", max_length=200, blank=True)
    weblink = models.CharField("Weblink", max_length=500, blank=True)
    organisator_pxl = models.CharField("Organisator PXL", max_length=200, blank=True)
    organisator_extern = models.CharField("Externe organisator", max_length=200, blank=True)
    bewijslink = models.CharField("Bewijslink", max_length=500, blank=True)
    verplicht_profiel = models.CharField("Verplicht profiel", max_length=200, blank=True)
    max_plaatsen = models.PositiveIntegerField("Maximum aantal plaatsen", null=True, blank=True)
    aantal_ingeschreven = models.PositiveIntegerField("Aantal ingeschreven", default=0)
    niveau = models.PositiveSmallIntegerField(
        "Niveau",
        null=True,
        blank=True,
        validators=[MinValueValidator(1), MaxValueValidator(5)],
    )
    status = models.CharField(
        "Status", max_length=16, choices=Status.choices, default=Status.CONCEPT
    )
    type_aanvraag = models.CharField(
        "Type aanvraag",
        max_length=16,
        choices=TypeAanvraag.choices,
        default=TypeAanvraag.DOCENT,
    )
    opmerkingen = models.TextField("Opmerkingen", null=True, blank=True)
    afgekeurd_bekeken_op = models.DateTimeField("Afkeuring bekeken op", null=True, blank=True)
    aangemaakt_door = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="aangemaakte_activiteiten",
        verbose_name="Aangemaakt door",
    )
    opleiding = models.ForeignKey(
        "opleidingen.Opleiding",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="activiteiten",
        verbose_name="Opleiding",
    )
    created_at = models.DateTimeField("Aangemaakt op", auto_now_add=True)
    updated_at = models.DateTimeField("Gewijzigd op", auto_now=True)

    class Meta:
        ordering = ["-datum", "startuur"]
        verbose_name = "activiteit"
        verbose_name_plural = "activiteiten"
        constraints = [
            models.CheckConstraint(
                condition=Q(status__in=["concept", "gepubliceerd", "in_review",
                                        "goedgekeurd", "afgekeurd", "afgerond"]),
                name="activiteit_status_geldig",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.titel} ({self.datum})"

    @property
    def uren(self) -> float:
        """Hours credited for taking part."""
        return bereken_uren(self.startuur, self.einduur)


class Inschrijving(models.Model):
    """
    Model representing a student's enrollment in an activity.

    Attributes
    ----------
    activiteit : ForeignKey
        The activity.
    student : ForeignKey
        The enrolled student, owner of the enrollment.
    inschrijvingsstatus : CharField
        Whether the student is still enrolled.
    effectieve_deelname : BooleanField
        Whether the student actually took part; empty until recorded.
    bewijs_status : CharField
        Proof-of-participation status, one of :class:`Inschrijving.BewijsStatus`.
    bewijs_afgekeurd_bekeken_op : DateTimeField
        When the student acknowledged a rejected proof.
    """

    class Status(models.TextChoices):
        INGESCHREVEN = "ingeschreven", "Ingeschreven"
        UITGESCHREVEN = "uitgeschreven", "Uitgeschreven"

    class BewijsStatus(models.TextChoices):
        """
        Enumeration of proof-of-participation statuses.

        NIET_INGEDIEND
            Nothing submitted yet.
        INGEDIEND
            Submitted, waiting for a docent.
        GOEDGEKEURD
            Accepted; the hours count on the scorekaart.
        AFGEKEURD
            Rejected; the student may submit again.
        """

        NIET_INGEDIEND = "niet_ingediend", "Niet ingediend"
        INGEDIEND = "ingediend", "Ingediend"
        GOEDGEKEURD = "goedgekeurd", "Goedgekeurd"
        AFGEKEURD = "afgekeurd", "Afgekeurd"

    activiteit = models.ForeignKey(
        Activiteit,
        on_delete=models.CASCADE,
        related_name="inschrijvingen",
        verbose_name="Activiteit",
    )
    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="inschrijvingen",
        verbose_name="Student",
    )
    inschrijvingsstatus = models.CharField(
        "Inschrijvingsstatus",
        max_length=16,
        choices=Status.choices,
        default=Status.INGESCHREVEN,
    )
    uitgeschreven_op = models.DateTimeField("Uitgeschreven op", null=True, blank=True)
    uitschrijf_reden = models.TextField("Reden uitschrijving", null=True, blank=True)
    effectieve_deelname = models.BooleanField("Effectieve deelname", null=True, blank=True)
    bewijs_status = models.CharField(
        "Status bewijs",
        max_length=16,
        choices=BewijsStatus.choices,
        default=BewijsStatus.NIET_INGEDIEND,
    )
    bewijs_ingediend_op = models.DateTimeField("Bewijs ingediend op", null=True, blank=True)
    bewijs_beoordeeld_op = models.DateTimeField("Bewijs beoordeeld op", null=True, blank=True)
    bewijs_feedback = models.TextField("Feedback op bewijs", null=True, blank=True)
    bewijs_afgekeurd_bekeken_op = models.DateTimeField(
        "Afkeuring bewijs bekeken op", null=True, blank=True
    )
    created_at = models.DateTimeField("Aangemaakt op", auto_now_add=True)

    class Meta:
        unique_together = ("activiteit", "student")
        ordering = ["-created_at"]
        verbose_name = "inschrijving"
        verbose_name_plural = "inschrijvingen"
        constraints = [
            models.CheckConstraint(
                condition=Q(bewijs_status__in=["niet_ingediend", "ingediend",
                                               "goedgekeurd", "afgekeurd"]),
                name="inschrijving_bewijs_status_geldig",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.student} -> {self.activiteit} ({self.inschrijvingsstatus})"
