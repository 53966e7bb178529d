# opleidingen/migrations/0001_initial.py
"""
Initial migration for the opleidingen application.

Creates the Opleiding model and the DocentOpleiding association.
"""

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    """
    Initial migration class for the opleidingen application.

    Attributes
    ----------
    initial : bool
        Indicates that this is the first migration for the app.
    dependencies : list
        Depends on the swappable user model.
    operations : list
        Creation of Opleiding and DocentOpleiding.
    """

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Opleiding",
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
                ("naam", models.CharField(max_length=200, verbose_name="Naam")),
                (
                    "code",
                    models.CharField(
                        error_messages={"unique": "Deze code is al in gebruik"},
                        max_length=32,
                        unique=True,
                        verbose_name="Code",
                    ),
                ),
                ("beschrijving", models.TextField(blank=True, verbose_name="Beschrijving")),
                ("actief", models.BooleanField(default=True, verbose_name="Actief")),
                (
                    "auto_goedkeuring_student_activiteiten",
                    models.BooleanField(
                        default=False,
                        verbose_name="Automatische goedkeuring van studentaanvragen",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Aangemaakt op")),
            ],
            options={
                "ordering": ["naam"],
                "verbose_name": "opleiding",
                "verbose_name_plural": "opleidingen",
            },
        ),
        migrations.CreateModel(
            name="DocentOpleiding",
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
                ("is_coordinator", models.BooleanField(default=False, verbose_name="Coördinator")),
                (
                    "docent",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="docent_opleidingen",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="Docent",
                    ),
                ),
                (
                    "opleiding",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="docent_koppelingen",
                        to="opleidingen.opleiding",
                        verbose_name="Opleiding",
                    ),
                ),
            ],
            options={
                "verbose_name": "docent-opleiding",
                "verbose_name_plural": "docent-opleidingen",
                "unique_together": {("docent", "opleiding")},
            },
        ),
    ]
