# bewijsstukken/migrations/0001_initial.py
"""
Initial migration for the bewijsstukken application.

This migration creates the Bewijsstuk model storing the proof files
attached to an enrollment.
"""

import bewijsstukken.models
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    """
    Initial migration class for the bewijsstukken application.

    Attributes
    ----------
    initial : bool
        Indicates that this is the first migration for the app.
    dependencies : list
        The activiteiten app, which owns Inschrijving.
    operations : list
        Creation of the Bewijsstuk model.
    """

    initial = True

    dependencies = [
        ("activiteiten", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Bewijsstuk",
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
                ("type", models.CharField(default="extra_bijlage", max_length=50, verbose_name="Type")),
                ("bestandsnaam", models.CharField(max_length=255, verbose_name="Bestandsnaam")),
                (
                    "bestand",
                    models.FileField(
                        upload_to=bewijsstukken.models.bewijs_upload_path,
                        verbose_name="Bestand",
                    ),
                ),
                ("uploaded_at", models.DateTimeField(auto_now_add=True, verbose_name="Geüpload op")),
                (
                    "inschrijving",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="bewijsstukken",
                        to="activiteiten.inschrijving",
                        verbose_name="Inschrijving",
                    ),
                ),
            ],
            options={
                "verbose_name": "bewijsstuk",
                "verbose_name_plural": "bewijsstukken",
                "ordering": ["-uploaded_at"],
            },
        ),
    ]
