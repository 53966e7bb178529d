# activiteiten/migrations/0001_initial.py
"""
Initial migration for the activiteiten application.

This migration creates the core models of the app:
- Activiteit: an activity offered by a docent or requested by a student.
- Inschrijving: a student's enrollment and its proof-of-participation state.
"""

from django.conf import settings
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    """
    Initial migration class for the activiteiten application.

    Attributes
    ----------
    initial : bool
        Indicates that this is the first migration for the app.
    dependencies : list
        The user model and the opleidingen app.
    operations : list
        Creation of Activiteit and Inschrijving with their status
        check constraints.
    """

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("opleidingen", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Activiteit",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("titel", models.CharField(max_length=200, verbose_name="Titel")),
                ("type_activiteit", models.CharField(max_length=100, verbose_name="Type activiteit")),
                ("aard", models.CharField(blank=True, max_length=100, verbose_name="Aard")),
                ("omschrijving", models.TextField(blank=True, verbose_name="Omschrijving")),
                ("datum", models.DateField(verbose_name="Datum")),
                ("startuur", models.TimeField(verbose_name="Startuur")),
                ("einduur", models.TimeField(verbose_name="Einduur")),
                ("locatie", models.CharField(blank=True, max_length=200, verbose_name="Locatie")),
                ("weblink", models.CharField(blank=True, max_length=500, verbose_name="Weblink")),
                (
                    "organisator_pxl",
                    models.CharField(blank=True, max_length=200, verbose_name="Organisator PXL"),
                ),
                (
                    "organisator_extern",
                    models.CharField(blank=True, max_length=200, verbose_name="Externe organisator"),
                ),
                ("bewijslink", models.CharField(blank=True, max_length=500, verbose_name="Bewijslink")),
                (
                    "verplicht_profiel",
                    models.CharField(blank=True, max_length=200, verbose_name="Verplicht profiel"),
                ),
                (
                    "max_plaatsen",
                    models.PositiveIntegerField(
                        blank=True, null=True, verbose_name="Maximum aantal plaatsen"
                    ),
                ),
                (
                    "aantal_ingeschreven",
                    models.PositiveIntegerField(default=0, verbose_name="Aantal ingeschreven"),
                ),
                (
                    "niveau",
                    models.PositiveSmallIntegerField(
                        blank=True,
                        null=True,
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(5),
                        ],
                        verbose_name="Niveau",
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("concept", "Concept"),
                            ("gepubliceerd", "Gepubliceerd"),
                            ("in_review", "In review"),
                            ("goedgekeurd", "Goedgekeurd"),
                            ("afgekeurd", "Afgekeurd"),
                            ("afgerond", "Afgerond"),
                        ],
                        default="concept",
                        max_length=16,
                        verbose_name="Status",
                    ),
                ),
                (
                    "type_aanvraag",
                    models.CharField(
                        choices=[
                            ("student", "Aanvraag van een student"),
                            ("docent", "Aangeboden door een docent"),
                        ],
                        default="docent",
                        max_length=16,
                        verbose_name="Type aanvraag",
                    ),
                ),
                ("opmerkingen", models.TextField(blank=True, null=True, verbose_name="Opmerkingen")),
                (
                    "afgekeurd_bekeken_op",
                    models.DateTimeField(blank=True, null=True, verbose_name="Afkeuring bekeken op"),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Aangemaakt op")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Gewijzigd op")),
                (
                    "aangemaakt_door",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="aangemaakte_activiteiten",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="Aangemaakt door",
                    ),
                ),
                (
                    "opleiding",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="activiteiten",
                        to="opleidingen.opleiding",
                        verbose_name="Opleiding",
                    ),
                ),
            ],
            options={
                "ordering": ["-datum", "startuur"],
                "verbose_name": "activiteit",
                "verbose_name_plural": "activiteiten",
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(
                            status__in=[
                                "concept",
                                "gepubliceerd",
                                "in_review",
                                "goedgekeurd",
                                "afgekeurd",
                                "afgerond",
                            ]
                        ),
                        name="activiteit_status_geldig",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Inschrijving",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "inschrijvingsstatus",
                    models.CharField(
                        choices=[
                            ("ingeschreven", "Ingeschreven"),
                            ("uitgeschreven", "Uitgeschreven"),
                        ],
                        default="ingeschreven",
                        max_length=16,
                        verbose_name="Inschrijvingsstatus",
                    ),
                ),
                (
                    "uitgeschreven_op",
                    models.DateTimeField(blank=True, null=True, verbose_name="Uitgeschreven op"),
                ),
                (
                    "uitschrijf_reden",
                    models.TextField(blank=True, null=True, verbose_name="Reden uitschrijving"),
                ),
                (
                    "effectieve_deelname",
                    models.BooleanField(blank=True, null=True, verbose_name="Effectieve deelname"),
                ),
                (
                    "bewijs_status",
                    models.CharField(
                        choices=[
                            ("niet_ingediend", "Niet ingediend"),
                            ("ingediend", "Ingediend"),
                            ("goedgekeurd", "Goedgekeurd"),
                            ("afgekeurd", "Afgekeurd"),
                        ],
                        default="niet_ingediend",
                        max_length=16,
                        verbose_name="Status bewijs",
                    ),
                ),
                (
                    "bewijs_ingediend_op",
                    models.DateTimeField(blank=True, null=True, verbose_name="Bewijs ingediend op"),
                ),
                (
                    "bewijs_beoordeeld_op",
                    models.DateTimeField(blank=True, null=True, verbose_name="Bewijs beoordeeld op"),
                ),
                (
                    "bewijs_feedback",
                    models.TextField(blank=True, null=True, verbose_name="Feedback op bewijs"),
                ),
                (
                    "bewijs_afgekeurd_bekeken_op",
                    models.DateTimeField(
                        blank=True, null=True, verbose_name="Afkeuring bewijs bekeken op"
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Aangemaakt op")),
                (
                    "activiteit",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="inschrijvingen",
                        to="activiteiten.activiteit",
                        verbose_name="Activiteit",
                    ),
                ),
                (
                    "student",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="inschrijvingen",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="Student",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "verbose_name": "inschrijving",
                "verbose_name_plural": "inschrijvingen",
                "unique_together": {("activiteit", "student")},
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(
                            bewijs_status__in=[
                                "niet_ingediend",
                                "ingediend",
                                "goedgekeurd",
                                "afgekeurd",
                            ]
                        ),
                        name="inschrijving_bewijs_status_geldig",
                    ),
                ],
            },
        ),
    ]
