# activiteiten/management/commands/bootstrap_demo.py
"""
Management command to initialize demo data.

This command creates demo programs, users of every role and a few
activities so the portal can be explored right after installation.
It can be executed using::

    python manage.py bootstrap_demo

Running it again updates the existing rows instead of duplicating them.
"""

from datetime import time, timedelta

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from accounts.models import UserProfile
from accounts.roles import Role
from activiteiten.models import Activiteit
from opleidingen.models import DocentOpleiding, Opleiding

User = get_user_model()


class Command(BaseCommand):
    """
    Django management command for demo initialization.

    Creates:
    - Three programs (BOUW, IT with automatic approval, ELEK).
    - An administrator, two docenten and two students.
    - Published activities in the coming weeks and one past
      activity for which a proof can be uploaded.

    Attributes
    ----------
    help : str
        Short description displayed in ``python manage.py help``.
    """

    help = "Create demo programs, users and activities."

    def _user(self, email, password, naam, role, opleiding=None):
        """
        Create or update a user and its profile.

        The password is only set when the user is created, so a
        changed demo password survives a rerun.
        """
        user, created = User.objects.get_or_create(
            username=email,
            defaults={
                "email": email,
                "is_staff": role == Role.ADMIN,
                "is_superuser": role == Role.ADMIN,
            },
        )
        if created:
            user.set_password(password)
            user.save()
            self.stdout.write(self.style.SUCCESS(f"{role.label} : {email}/{password}"))
        UserProfile.objects.update_or_create(
            user=user,
            defaults={"naam": naam, "role": role, "opleiding": opleiding},
        )
        return user

    @transaction.atomic
    def handle(self, *args, **options):
        """
        Execute the command.

        Notes
        -----
        - Admin credentials: ``admin@pxl.be/admin123``.
        - Docent credentials: ``docent.bouw@pxl.be/docent123``.
        - Student credentials: ``student.bouw@student.pxl.be/student123``.
        """
        # --- Programs ---
        bouw, _ = Opleiding.objects.update_or_create(
            code="BOUW",
            defaults={"naam": "Bouw", "beschrijving": "Bachelor in de bouw"},
        )
        it, _ = Opleiding.objects.update_or_create(
            code="IT",
            defaults={
                "naam": "Toegepaste informatica",
                "beschrijving": "Bachelor toegepaste informatica",
                "auto_goedkeuring_student_activiteiten": True,
            },
        )
        Opleiding.objects.update_or_create(
            code="ELEK",
            defaults={"naam": "Elektronica-ICT", "beschrijving": "Bachelor elektronica-ICT"},
        )

        # --- Users ---
        admin = self._user("admin@pxl.be", "admin123", "Beheerder PXL", Role.ADMIN)
        docent_bouw = self._user("docent.bouw@pxl.be", "docent123", "Jan Docent", Role.DOCENT)
        docent_multi = self._user("docent.multi@pxl.be", "docent123", "Sarah Coördinator", Role.DOCENT)
        self._user("student.bouw@student.pxl.be", "student123", "Lisa Student", Role.STUDENT, bouw)
        self._user("student.it@student.pxl.be", "student123", "Tom Developer", Role.STUDENT, it)

        # --- Docent to program links ---
        DocentOpleiding.objects.update_or_create(
            docent=docent_bouw, opleiding=bouw, defaults={"is_coordinator": True}
        )
        DocentOpleiding.objects.update_or_create(
            docent=docent_multi, opleiding=it, defaults={"is_coordinator": True}
        )
        DocentOpleiding.objects.update_or_create(
            docent=docent_multi, opleiding=bouw, defaults={"is_coordinator": False}
        )

        today = timezone.localdate()

        # --- Activities ---
        demo_activiteiten = [
            {
                "titel": "Workshop BIM Modellering",
                "type_activiteit": "Workshop",
                "omschrijving": "Kennismaking met BIM-software voor bouwprojecten.",
                "datum": today + timedelta(days=14),
                "startuur": time(13, 0),
                "einduur": time(17, 0),
                "locatie": "Campus Diepenbeek, lokaal B104",
                "max_plaatsen": 20,
                "niveau": 2,
                "opleiding": bouw,
                "aangemaakt_door": docent_bouw,
            },
            {
                "titel": "Gastcollege Duurzaam Bouwen",
                "type_activiteit": "Lezing",
                "omschrijving": "Een architect vertelt over circulaire materialen.",
                "datum": today + timedelta(days=21),
                "startuur": time(10, 0),
                "einduur": time(12, 0),
                "locatie": "Campus Elfde Linie, aula",
                "max_plaatsen": 80,
                "niveau": 1,
                "opleiding": bouw,
                "aangemaakt_door": docent_multi,
            },
            {
                "titel": "Hackathon Open Data",
                "type_activiteit": "Hackathon",
                "omschrijving": "Een dag bouwen met open data van de stad Hasselt.",
                "datum": today + timedelta(days=30),
                "startuur": time(9, 0),
                "einduur": time(18, 0),
                "locatie": "Corda Campus",
                "max_plaatsen": 40,
                "niveau": 3,
                "opleiding": it,
                "aangemaakt_door": docent_multi,
            },
            {
                "titel": "Werfbezoek Hasselt",
                "type_activiteit": "Excursie",
                "omschrijving": "Rondleiding op een lopende werf.",
                "datum": today - timedelta(days=7),
                "startuur": time(9, 0),
                "einduur": time(12, 30),
                "locatie": "Hasselt",
                "max_plaatsen": 15,
                "niveau": 2,
                "opleiding": bouw,
                "aangemaakt_door": admin,
            },
        ]
        for data in demo_activiteiten:
            titel = data.pop("titel")
            data.update({
                "status": Activiteit.Status.GEPUBLICEERD,
                "type_aanvraag": Activiteit.TypeAanvraag.DOCENT,
            })
            Activiteit.objects.update_or_create(titel=titel, defaults=data)

        self.stdout.write(self.style.SUCCESS("Demo data initialized."))
