# bewijsstukken/tests/test_upload.py
"""
Tests for uploading, listing and deleting proof files.
"""

import os
from datetime import timedelta

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import override_settings
from django.utils import timezone

from accounts.roles import Role
from activiteiten.models import Activiteit, Inschrijving
from bewijsstukken.models import Bewijsstuk
from pxl_activiteiten.testing import PortalTestCase


def pdf(name="bewijs.pdf"):
    return SimpleUploadedFile(name, b"%PDF-1.4 bewijs", content_type="application/pdf")


class UploadTests(PortalTestCase):
    def setUp(self):
        self.docent = self.make_user("docent@pxl.be", Role.DOCENT)
        self.student = self.make_user("lisa@student.pxl.be")
        self.activiteit = self.make_activiteit(
            self.docent, datum=timezone.localdate() - timedelta(days=1)
        )
        self.inschrijving = Inschrijving.objects.create(
            activiteit=self.activiteit, student=self.student
        )
        self.client.force_login(self.student)

    def test_upload_for_own_enrollment(self):
        resp = self.client.post(
            "/bewijsstukken", {"file": pdf(), "inschrijvingId": self.inschrijving.pk}
        )
        self.assertEqual(resp.status_code, 201)
        data = resp.json()
        self.assertEqual(data["bestandsnaam"], "bewijs.pdf")
        self.assertEqual(data["type"], "extra_bijlage")
        self.assertEqual(data["inschrijvingId"], self.inschrijving.pk)
        bewijsstuk = Bewijsstuk.objects.get(pk=data["id"])
        self.assertTrue(os.path.exists(bewijsstuk.bestand.path))
        self.assertTrue(bewijsstuk.bestand.name.startswith("bewijsstukken/"))

    def test_file_is_validated(self):
        resp = self.client.post("/bewijsstukken", {"inschrijvingId": self.inschrijving.pk})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "Geen bestand geüpload"})

        tekst = SimpleUploadedFile("notities.txt", b"hallo", content_type="text/plain")
        resp = self.client.post("/bewijsstukken", {"file": tekst, "inschrijvingId": self.inschrijving.pk})
        self.assertEqual(
            resp.json(), {"error": "Ongeldig bestandstype. Toegestaan: JPG, PNG, GIF, WEBP, PDF"}
        )

        with override_settings(BEWIJS_MAX_UPLOAD_SIZE=4):
            resp = self.client.post(
                "/bewijsstukken", {"file": pdf(), "inschrijvingId": self.inschrijving.pk}
            )
        self.assertEqual(resp.status_code, 400)
        self.assertTrue(resp.json()["error"].startswith("Bestand is te groot"))
        self.assertFalse(Bewijsstuk.objects.exists())

    def test_target_is_required(self):
        resp = self.client.post("/bewijsstukken", {"file": pdf()})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "inschrijvingId of activiteitId is verplicht"})

    def test_foreign_enrollment(self):
        ander = self.make_user("tom@student.pxl.be")
        self.client.force_login(ander)
        resp = self.client.post(
            "/bewijsstukken", {"file": pdf(), "inschrijvingId": self.inschrijving.pk}
        )
        self.assertEqual(resp.status_code, 404)
        self.assertFalse(Bewijsstuk.objects.exists())

    def test_upload_for_own_request_creates_enrollment(self):
        aanvraag = self.make_activiteit(
            self.student,
            type_aanvraag=Activiteit.TypeAanvraag.STUDENT,
            status=Activiteit.Status.GOEDGEKEURD,
        )
        resp = self.client.post("/bewijsstukken", {"file": pdf(), "activiteitId": aanvraag.pk})
        self.assertEqual(resp.status_code, 201)
        inschrijving = Inschrijving.objects.get(activiteit=aanvraag, student=self.student)
        self.assertTrue(inschrijving.effectieve_deelname)
        self.assertEqual(resp.json()["inschrijvingId"], inschrijving.pk)

    def test_list_and_delete(self):
        first = self.client.post(
            "/bewijsstukken", {"file": pdf("een.pdf"), "inschrijvingId": self.inschrijving.pk}
        ).json()
        self.client.post(
            "/bewijsstukken", {"file": pdf("twee.pdf"), "inschrijvingId": self.inschrijving.pk}
        )
        listing = self.client.get("/bewijsstukken", {"inschrijvingId": self.inschrijving.pk}).json()
        self.assertEqual({b["bestandsnaam"] for b in listing}, {"een.pdf", "twee.pdf"})
        by_activity = self.client.get("/bewijsstukken", {"activiteitId": self.activiteit.pk}).json()
        self.assertEqual(len(by_activity), 2)

        pad = Bewijsstuk.objects.get(pk=first["id"]).bestand.path
        resp = self.client.delete(f"/bewijsstukken/{first['id']}")
        self.assertEqual(resp.status_code, 200)
        self.assertFalse(os.path.exists(pad))
        self.assertEqual(self.client.get(f"/bewijsstukken/{first['id']}").status_code, 404)

    def test_docent_reads_but_cannot_delete(self):
        bewijsstuk = self.client.post(
            "/bewijsstukken", {"file": pdf(), "inschrijvingId": self.inschrijving.pk}
        ).json()
        self.client.force_login(self.docent)
        self.assertEqual(self.client.get(f"/bewijsstukken/{bewijsstuk['id']}").status_code, 200)
        resp = self.client.delete(f"/bewijsstukken/{bewijsstuk['id']}")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Bewijsstuk niet gevonden"})
        self.assertTrue(Bewijsstuk.objects.filter(pk=bewijsstuk["id"]).exists())
