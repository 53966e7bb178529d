# pxl_activiteiten/testing.py
"""
Shared fixtures for the test suites of the project.

:class:`PortalTestCase` redirects the HTML log and the uploaded files
to a temporary directory and offers shortcuts to create users of a
given role and to send JSON requests.
"""

import json
import shutil
import tempfile
from datetime import time, timedelta

from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from django.utils import timezone

from accounts.roles import Role

User = get_user_model()

PASSWORD = "geheim-wachtwoord"


class PortalTestCase(TestCase):
    """
    Base test case for the JSON endpoints.

    Every test class gets its own temporary ``LOG_DIR`` and
    ``MEDIA_ROOT``, removed once the class is done.
    """

    @classmethod
    def setUpClass(cls):
        cls._tmpdir = tempfile.mkdtemp(prefix="pxl-tests-")
        cls._settings = override_settings(
            LOG_DIR=cls._tmpdir,
            MEDIA_ROOT=cls._tmpdir,
            PASSWORD_HASHERS=["django.contrib.auth.hashers.MD5PasswordHasher"],
        )
        cls._settings.enable()
        super().setUpClass()

    @classmethod
    def tearDownClass(cls):
        super().tearDownClass()
        cls._settings.disable()
        shutil.rmtree(cls._tmpdir, ignore_errors=True)

    @staticmethod
    def make_user(email, role=Role.STUDENT, naam=None, opleiding=None, active=True):
        """Create a user with a profile of the given role."""
        user = User.objects.create_user(
            username=email, email=email, password=PASSWORD, is_active=active
        )
        profile = user.profile
        profile.naam = naam or email.split("@")[0]
        profile.role = role
        profile.opleiding = opleiding
        profile.save()
        return user

    def send_json(self, method, url, data=None):
        """Send ``data`` as a JSON body with the given HTTP method."""
        handler = getattr(self.client, method.lower())
        body = json.dumps(data) if data is not None else ""
        return handler(url, body, content_type="application/json")

    @staticmethod
    def make_activiteit(maker, **fields):
        """Create an activity offered by ``maker``, published one week from now."""
        from activiteiten.models import Activiteit

        values = {
            "titel": "Workshop",
            "type_activiteit": "Workshop",
            "datum": timezone.localdate() + timedelta(days=7),
            "startuur": time(9, 0),
            "einduur": time(12, 0),
            "status": Activiteit.Status.GEPUBLICEERD,
            "type_aanvraag": Activiteit.TypeAanvraag.DOCENT,
            "aangemaakt_door": maker,
        }
        values.update(fields)
        return Activiteit.objects.create(**values)
