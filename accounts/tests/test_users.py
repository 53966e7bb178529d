# accounts/tests/test_users.py
"""
Tests for user management by administrators.
"""

from django.contrib.auth.models import User

from accounts.models import UserProfile
from accounts.roles import Role
from opleidingen.models import Opleiding
from pxl_activiteiten.testing import PortalTestCase


class UserManagementTests(PortalTestCase):
    def setUp(self):
        self.bouw = Opleiding.objects.create(naam="Bouw", code="BOUW")
        self.admin = self.make_user("admin@pxl.be", Role.ADMIN, naam="Beheerder")
        self.client.force_login(self.admin)

    def test_create_student(self):
        resp = self.send_json(
            "post",
            "/admin/users",
            {
                "naam": "Lisa Student",
                "email": "Lisa@Student.pxl.be",
                "password": "student123",
                "role": "student",
                "opleidingId": self.bouw.pk,
            },
        )
        self.assertEqual(resp.status_code, 200)
        data = resp.json()["user"]
        self.assertEqual(data["email"], "lisa@student.pxl.be")
        self.assertTrue(data["actief"])
        user = User.objects.get(pk=data["id"])
        self.assertTrue(user.check_password("student123"))
        self.assertEqual(user.profile.opleiding, self.bouw)

    def test_student_needs_a_program(self):
        resp = self.send_json(
            "post",
            "/admin/users",
            {"naam": "X", "email": "x@student.pxl.be", "password": "student123", "role": "student"},
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(
            resp.json()["error"], "Studenten moeten gekoppeld worden aan een opleiding"
        )
        self.assertFalse(User.objects.filter(email="x@student.pxl.be").exists())

    def test_docent_program_is_cleared(self):
        resp = self.send_json(
            "post",
            "/admin/users",
            {
                "naam": "Jan Docent",
                "email": "jan@pxl.be",
                "password": "docent123",
                "role": "docent",
                "opleidingId": self.bouw.pk,
            },
        )
        self.assertEqual(resp.status_code, 200)
        profile = UserProfile.objects.get(user_id=resp.json()["user"]["id"])
        self.assertEqual(profile.role, Role.DOCENT)
        self.assertIsNone(profile.opleiding)

    def test_missing_fields_and_duplicate_email(self):
        resp = self.send_json("post", "/admin/users", {"email": "y@pxl.be"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "Alle velden zijn verplicht")

        resp = self.send_json(
            "post",
            "/admin/users",
            {"naam": "Dubbel", "email": "ADMIN@pxl.be", "password": "x" * 8, "role": "admin"},
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "Dit email adres is al in gebruik")

    def test_list_filtered_by_role(self):
        self.make_user("s@student.pxl.be", opleiding=self.bouw)
        self.make_user("d@pxl.be", Role.DOCENT)
        resp = self.client.get("/admin/users", {"role": "docent"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([u["email"] for u in resp.json()["users"]], ["d@pxl.be"])

        self.assertEqual(self.client.get("/admin/users", {"role": "root"}).status_code, 400)

    def test_update_keeps_password_when_short(self):
        student = self.make_user("s@student.pxl.be", naam="Oud", opleiding=self.bouw)
        old_hash = student.password
        resp = self.send_json(
            "patch",
            f"/admin/users/{student.pk}",
            {
                "naam": "Nieuw",
                "email": "s@student.pxl.be",
                "role": "student",
                "opleidingId": self.bouw.pk,
                "password": "kort",
                "actief": False,
            },
        )
        self.assertEqual(resp.status_code, 200)
        student.refresh_from_db()
        self.assertEqual(student.profile.naam, "Nieuw")
        self.assertFalse(student.is_active)
        self.assertEqual(student.password, old_hash)

    def test_update_requires_core_fields(self):
        student = self.make_user("s@student.pxl.be", opleiding=self.bouw)
        resp = self.send_json("patch", f"/admin/users/{student.pk}", {"naam": "Enkel naam"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "Naam, email en rol zijn verplicht")

    def test_unknown_user(self):
        resp = self.client.get("/admin/users/9999")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Gebruiker niet gevonden"})

    def test_delete(self):
        docent = self.make_user("d@pxl.be", Role.DOCENT)
        resp = self.client.delete(f"/admin/users/{docent.pk}")
        self.assertEqual(resp.status_code, 200)
        self.assertFalse(User.objects.filter(pk=docent.pk).exists())

    def test_cannot_delete_self(self):
        resp = self.client.delete(f"/admin/users/{self.admin.pk}")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "Je kunt jezelf niet verwijderen"})
        self.assertTrue(User.objects.filter(pk=self.admin.pk).exists())


class ProfileSignalTests(PortalTestCase):
    def test_superuser_becomes_admin(self):
        user = User.objects.create_superuser("root", "root@pxl.be", "x")
        self.assertEqual(user.profile.role, Role.ADMIN)

    def test_regular_user_defaults_to_student(self):
        user = User.objects.create_user("nieuw", first_name="An", last_name="Peeters")
        self.assertEqual(user.profile.role, Role.STUDENT)
        self.assertEqual(user.profile.naam, "An Peeters")
