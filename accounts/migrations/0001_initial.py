# accounts/migrations/0001_initial.py
"""
Initial migration for the accounts application.

Creates the UserProfile model holding the display name, role and
home program of every user.
"""

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    """
    Migration class for initializing the accounts application.

    Attributes
    ----------
    initial : bool
        Indicates that this is the first migration of the app.
    dependencies : list
        The swappable user model and the opleidingen app.
    operations : list
        Creation of the UserProfile model.
    """

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("opleidingen", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="UserProfile",
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
                ("naam", models.CharField(blank=True, max_length=200, verbose_name="Naam")),
                (
                    "role",
                    models.CharField(
                        choices=[
                            ("student", "Student"),
                            ("docent", "Docent"),
                            ("admin", "Administrator"),
                        ],
                        default="student",
                        max_length=16,
                        verbose_name="Rol",
                    ),
                ),
                (
                    "opleiding",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="studenten",
                        to="opleidingen.opleiding",
                        verbose_name="Opleiding",
                    ),
                ),
                (
                    "user",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="profile",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["naam"],
                "verbose_name": "gebruikersprofiel",
                "verbose_name_plural": "gebruikersprofielen",
            },
        ),
    ]
