# activiteiten/tests/test_student.py
"""
Tests for the student-facing operations: dashboard counts, activity
requests, enrollments and the scorekaart.
"""

from datetime import timedelta

from django.utils import timezone

from accounts.roles import Role
from activiteiten.models import Activiteit, Inschrijving
from opleidingen.models import Opleiding
from pxl_activiteiten.testing import PortalTestCase

BewijsStatus = Inschrijving.BewijsStatus


class StudentCountsTests(PortalTestCase):
    def setUp(self):
        self.docent = self.make_user("docent@pxl.be", Role.DOCENT)
        self.student = self.make_user("lisa@student.pxl.be")
        self.client.force_login(self.student)

    def aanvraag(self, **fields):
        return self.make_activiteit(
            self.student,
            type_aanvraag=Activiteit.TypeAanvraag.STUDENT,
            status=Activiteit.Status.AFGEKEURD,
            **fields,
        )

    def test_acknowledged_rejection_is_not_counted(self):
        self.aanvraag(afgekeurd_bekeken_op=timezone.now())
        resp = self.client.get("/student/counts")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["aanvragen"], 0)

        self.aanvraag()
        self.assertEqual(self.client.get("/student/counts").json()["aanvragen"], 1)

    def test_rejections_of_others_are_not_counted(self):
        ander = self.make_user("tom@student.pxl.be")
        self.make_activiteit(
            ander,
            type_aanvraag=Activiteit.TypeAanvraag.STUDENT,
            status=Activiteit.Status.AFGEKEURD,
        )
        self.assertEqual(self.client.get("/student/counts").json(), {"aanvragen": 0, "bewijsstukken": 0})

    def test_enrollments_needing_attention(self):
        gisteren = timezone.localdate() - timedelta(days=1)
        verleden = self.make_activiteit(self.docent, datum=gisteren)
        toekomst = self.make_activiteit(self.docent)
        concept = self.make_activiteit(self.docent, datum=gisteren, status=Activiteit.Status.CONCEPT)
        afgekeurd = self.make_activiteit(self.docent, datum=gisteren)
        gelezen = self.make_activiteit(self.docent, datum=gisteren)

        Inschrijving.objects.create(activiteit=verleden, student=self.student)
        Inschrijving.objects.create(activiteit=toekomst, student=self.student)
        Inschrijving.objects.create(activiteit=concept, student=self.student)
        Inschrijving.objects.create(
            activiteit=afgekeurd, student=self.student, bewijs_status=BewijsStatus.AFGEKEURD
        )
        Inschrijving.objects.create(
            activiteit=gelezen,
            student=self.student,
            bewijs_status=BewijsStatus.AFGEKEURD,
            bewijs_afgekeurd_bekeken_op=timezone.now(),
        )
        self.assertEqual(self.client.get("/student/counts").json()["bewijsstukken"], 2)

    def test_docenten_are_denied(self):
        self.client.force_login(self.docent)
        self.assertEqual(self.client.get("/student/counts").status_code, 401)


class AanvraagTests(PortalTestCase):
    PAYLOAD = {
        "titel": "Extern congres",
        "typeActiviteit": "Congres",
        "datum": "2025-02-10",
        "startuur": "09:00",
        "einduur": "17:00",
        "niveau": 5,
    }

    def test_request_waits_for_review(self):
        bouw = Opleiding.objects.create(naam="Bouw", code="BOUW")
        student = self.make_user("lisa@student.pxl.be", opleiding=bouw)
        self.client.force_login(student)
        resp = self.send_json("post", "/student/aanvragen", self.PAYLOAD)
        self.assertEqual(resp.status_code, 201)
        data = resp.json()
        self.assertEqual(data["status"], "in_review")
        self.assertEqual(data["typeAanvraag"], "student")
        self.assertEqual(data["opleidingId"], bouw.pk)
        self.assertIsNone(data["niveau"])
        self.assertFalse(Inschrijving.objects.exists())

    def test_auto_approval_enrolls(self):
        it = Opleiding.objects.create(naam="IT", code="IT", auto_goedkeuring_student_activiteiten=True)
        student = self.make_user("tom@student.pxl.be", opleiding=it)
        self.client.force_login(student)
        resp = self.send_json("post", "/student/aanvragen", self.PAYLOAD)
        self.assertEqual(resp.json()["status"], "goedgekeurd")
        inschrijving = Inschrijving.objects.get(student=student)
        self.assertTrue(inschrijving.effectieve_deelname)

    def test_missing_fields(self):
        student = self.make_user("lisa@student.pxl.be")
        self.client.force_login(student)
        resp = self.send_json("post", "/student/aanvragen", {"titel": "Half"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(
            resp.json(), {"error": "Titel, type, datum, startuur en einduur zijn verplicht"}
        )

    def test_reading_acknowledges_rejections(self):
        student = self.make_user("lisa@student.pxl.be")
        aanvraag = self.make_activiteit(
            student,
            type_aanvraag=Activiteit.TypeAanvraag.STUDENT,
            status=Activiteit.Status.AFGEKEURD,
        )
        self.client.force_login(student)
        aanvragen = self.client.get("/student/aanvragen").json()["aanvragen"]
        self.assertIsNone(aanvragen[0]["afgekeurdBekekenOp"])
        aanvraag.refresh_from_db()
        self.assertIsNotNone(aanvraag.afgekeurd_bekeken_op)
        self.assertEqual(self.client.get("/student/counts").json()["aanvragen"], 0)


class EnrollmentTests(PortalTestCase):
    def setUp(self):
        self.docent = self.make_user("docent@pxl.be", Role.DOCENT)
        self.student = self.make_user("lisa@student.pxl.be")
        self.activiteit = self.make_activiteit(self.docent, max_plaatsen=1)
        self.client.force_login(self.student)

    def enroll(self, activiteit_id):
        return self.send_json("post", "/student/inschrijvingen", {"activiteitId": activiteit_id})

    def test_prikbord_shows_open_activities(self):
        self.make_activiteit(self.docent, status=Activiteit.Status.CONCEPT)
        self.make_activiteit(self.docent, datum=timezone.localdate() - timedelta(days=1))
        activiteiten = self.client.get("/student/activiteiten").json()["activiteiten"]
        self.assertEqual([a["id"] for a in activiteiten], [self.activiteit.pk])
        self.assertFalse(activiteiten[0]["ingeschreven"])

    def test_enroll_and_unenroll(self):
        resp = self.enroll(self.activiteit.pk)
        self.assertEqual(resp.status_code, 201)
        inschrijving_id = resp.json()["id"]
        self.activiteit.refresh_from_db()
        self.assertEqual(self.activiteit.aantal_ingeschreven, 1)
        self.assertTrue(self.client.get("/student/activiteiten").json()["activiteiten"][0]["ingeschreven"])

        resp = self.enroll(self.activiteit.pk)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "Je bent al ingeschreven voor deze activiteit"})

        resp = self.send_json("delete", f"/student/inschrijvingen/{inschrijving_id}", {"reden": "Ziek"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["inschrijvingsstatus"], "uitgeschreven")
        self.assertEqual(resp.json()["uitschrijfReden"], "Ziek")
        self.activiteit.refresh_from_db()
        self.assertEqual(self.activiteit.aantal_ingeschreven, 0)

        resp = self.client.delete(f"/student/inschrijvingen/{inschrijving_id}")
        self.assertEqual(resp.json(), {"error": "Je bent al uitgeschreven voor deze activiteit"})

        resp = self.enroll(self.activiteit.pk)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["id"], inschrijving_id)
        self.assertEqual(resp.json()["inschrijvingsstatus"], "ingeschreven")

    def test_full_activity(self):
        ander = self.make_user("tom@student.pxl.be")
        Inschrijving.objects.create(activiteit=self.activiteit, student=ander)
        resp = self.enroll(self.activiteit.pk)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "Deze activiteit is volzet"})

    def test_only_published_activities(self):
        concept = self.make_activiteit(self.docent, status=Activiteit.Status.CONCEPT)
        resp = self.enroll(concept.pk)
        self.assertEqual(resp.json(), {"error": "Deze activiteit is niet beschikbaar voor inschrijving"})
        self.assertEqual(self.enroll(9999).status_code, 404)
        self.assertEqual(
            self.send_json("post", "/student/inschrijvingen", {}).json(),
            {"error": "Activiteit ID is verplicht"},
        )
        self.assertEqual(self.enroll("abc").status_code, 400)

    def test_cannot_unenroll_from_past_activity(self):
        verleden = self.make_activiteit(self.docent, datum=timezone.localdate() - timedelta(days=2))
        inschrijving = Inschrijving.objects.create(activiteit=verleden, student=self.student)
        resp = self.client.delete(f"/student/inschrijvingen/{inschrijving.pk}")
        self.assertEqual(resp.status_code, 400)
        inschrijving.refresh_from_db()
        self.assertEqual(inschrijving.inschrijvingsstatus, Inschrijving.Status.INGESCHREVEN)

    def test_enrollments_of_others_are_hidden(self):
        ander = self.make_user("tom@student.pxl.be")
        vreemd = Inschrijving.objects.create(activiteit=self.activiteit, student=ander)
        self.assertEqual(self.client.get(f"/student/inschrijvingen/{vreemd.pk}").status_code, 404)
        self.assertEqual(self.client.delete(f"/student/inschrijvingen/{vreemd.pk}").status_code, 404)
        self.assertEqual(self.client.get("/student/inschrijvingen").json(), {"inschrijvingen": []})
