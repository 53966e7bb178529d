# activiteiten/tests/test_status.py
"""
Tests for the activity status update and its validation.
"""

from unittest.mock import patch

from accounts.roles import Role
from activiteiten.models import Activiteit
from activiteiten.validators import REVIEW_STATUSSEN, validate_status
from pxl_activiteiten.exceptions import ValidationFailed
from pxl_activiteiten.testing import PortalTestCase


class ValidateStatusTests(PortalTestCase):
    def test_accepts_every_activity_status(self):
        for status in Activiteit.Status.values:
            self.assertEqual(validate_status(status), status)

    def test_rejects_unknown_empty_and_non_string(self):
        for candidate in ("onbekend", "", None, 3, "GOEDGEKEURD"):
            with self.assertRaises(ValidationFailed) as ctx:
                validate_status(candidate)
            self.assertEqual(ctx.exception.message, "Ongeldige status")

    def test_review_domain_is_narrower(self):
        self.assertEqual(validate_status("afgekeurd", REVIEW_STATUSSEN), "afgekeurd")
        with self.assertRaises(ValidationFailed):
            validate_status("afgerond", REVIEW_STATUSSEN)


class UpdateActivityStatusTests(PortalTestCase):
    def setUp(self):
        self.admin = self.make_user("admin@pxl.be", Role.ADMIN)
        self.activiteit = self.make_activiteit(
            self.admin,
            titel="Workshop BIM Modellering",
            status=Activiteit.Status.CONCEPT,
            opmerkingen="Eerste versie",
        )
        self.url = f"/admin/activiteiten/{self.activiteit.pk}/status"
        self.client.force_login(self.admin)

    def test_approve_concept(self):
        resp = self.send_json("patch", self.url, {"status": "goedgekeurd"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json(),
            {
                "success": True,
                "activiteit": {
                    "id": self.activiteit.pk,
                    "titel": "Workshop BIM Modellering",
                    "status": "goedgekeurd",
                },
            },
        )

    def test_unknown_status_is_rejected_without_write(self):
        resp = self.send_json("patch", self.url, {"status": "onbekend"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "Ongeldige status"})
        self.activiteit.refresh_from_db()
        self.assertEqual(self.activiteit.status, Activiteit.Status.CONCEPT)

    def test_missing_status_is_rejected(self):
        resp = self.send_json("patch", self.url, {"opmerkingen": "enkel tekst"})
        self.assertEqual(resp.status_code, 400)
        self.activiteit.refresh_from_db()
        self.assertEqual(self.activiteit.opmerkingen, "Eerste versie")

    def test_remarks_are_merged(self):
        self.send_json("patch", self.url, {"status": "gepubliceerd"})
        self.activiteit.refresh_from_db()
        self.assertEqual(self.activiteit.opmerkingen, "Eerste versie")

        self.send_json("patch", self.url, {"status": "afgerond", "opmerkingen": ""})
        self.activiteit.refresh_from_db()
        self.assertEqual(self.activiteit.opmerkingen, "Eerste versie")

        self.send_json("patch", self.url, {"status": "afgerond", "opmerkingen": "Geslaagd"})
        self.activiteit.refresh_from_db()
        self.assertEqual(self.activiteit.opmerkingen, "Geslaagd")

    def test_transitions_are_not_ordered(self):
        self.activiteit.status = Activiteit.Status.AFGEROND
        self.activiteit.save()
        resp = self.send_json("patch", self.url, {"status": "concept"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["activiteit"]["status"], "concept")

    def test_unknown_activity(self):
        resp = self.send_json("patch", "/admin/activiteiten/9999/status", {"status": "concept"})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Activiteit niet gevonden"})

    def test_invalid_status_is_reported_before_lookup(self):
        resp = self.send_json("patch", "/admin/activiteiten/9999/status", {"status": "x"})
        self.assertEqual(resp.status_code, 400)

    def test_non_admins_are_denied_without_write(self):
        docent = self.make_user("docent@pxl.be", Role.DOCENT)
        for user in (None, docent):
            self.client.logout()
            if user is not None:
                self.client.force_login(user)
            resp = self.send_json("patch", self.url, {"status": "goedgekeurd"})
            self.assertEqual(resp.status_code, 401)
            self.assertEqual(resp.json(), {"error": "Unauthorized"})
        self.activiteit.refresh_from_db()
        self.assertEqual(self.activiteit.status, Activiteit.Status.CONCEPT)

    def test_unexpected_failure_gives_generic_500(self):
        with patch(
            "activiteiten.views_admin.update_activity_status",
            side_effect=RuntimeError("database weg"),
        ):
            resp = self.send_json("patch", self.url, {"status": "goedgekeurd"})
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(
            resp.json(), {"error": "Er is een fout opgetreden bij het wijzigen van de status"}
        )
