# accounts/tests/test_auth.py
"""
Tests for session handling and the role guard.
"""

import json

from django.test import Client

from accounts.permissions import Caller, authorize
from accounts.roles import ADMIN_ONLY, ALL_ROLES, DOCENT_OR_ADMIN, STUDENT_ONLY, Role
from activiteiten.models import Activiteit
from pxl_activiteiten.testing import PASSWORD, PortalTestCase


class AuthorizeTests(PortalTestCase):
    """The authorization predicate, independent of any request."""

    def test_anonymous_caller_is_denied(self):
        for roles in (ADMIN_ONLY, DOCENT_OR_ADMIN, STUDENT_ONLY, ALL_ROLES):
            self.assertFalse(authorize(None, roles))

    def test_role_membership_decides(self):
        user = self.make_user("d@pxl.be", Role.DOCENT)
        docent = Caller(user=user, role=Role.DOCENT.value)
        self.assertTrue(authorize(docent, DOCENT_OR_ADMIN))
        self.assertTrue(authorize(docent, ALL_ROLES))
        self.assertFalse(authorize(docent, ADMIN_ONLY))
        self.assertFalse(authorize(docent, STUDENT_ONLY))
        self.assertEqual(docent.id, user.pk)

    def test_admin_is_not_a_student(self):
        admin = Caller(user=None, role=Role.ADMIN.value)
        self.assertTrue(authorize(admin, DOCENT_OR_ADMIN))
        self.assertFalse(authorize(admin, STUDENT_ONLY))


class LoginTests(PortalTestCase):
    def setUp(self):
        self.user = self.make_user("lisa@student.pxl.be", naam="Lisa Student")

    def test_login_with_email_and_password(self):
        resp = self.send_json(
            "post", "/auth/login", {"email": "Lisa@student.pxl.be", "password": PASSWORD}
        )
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["user"]["naam"], "Lisa Student")
        self.assertEqual(body["user"]["role"], "student")

        me = self.client.get("/auth/me")
        self.assertEqual(me.status_code, 200)
        self.assertEqual(me.json()["user"]["id"], self.user.pk)

    def test_missing_credentials(self):
        resp = self.send_json("post", "/auth/login", {"email": "lisa@student.pxl.be"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "Email en wachtwoord zijn verplicht"})

    def test_wrong_password(self):
        resp = self.send_json(
            "post", "/auth/login", {"email": "lisa@student.pxl.be", "password": "fout"}
        )
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"error": "Ongeldige inloggegevens"})

    def test_inactive_account_cannot_log_in(self):
        self.make_user("oud@student.pxl.be", active=False)
        resp = self.send_json(
            "post", "/auth/login", {"email": "oud@student.pxl.be", "password": PASSWORD}
        )
        self.assertEqual(resp.status_code, 401)

    def test_malformed_json(self):
        resp = self.client.post("/auth/login", "{niet json", content_type="application/json")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "Ongeldige JSON"})

    def test_logout_ends_session(self):
        self.client.force_login(self.user)
        self.assertEqual(self.client.post("/auth/logout").status_code, 200)
        self.assertEqual(self.client.get("/auth/me").status_code, 401)

    def test_csrf_cookie_is_set(self):
        resp = self.client.get("/auth/csrf")
        self.assertEqual(resp.status_code, 200)
        self.assertIn("csrftoken", resp.cookies)


class RoleGuardTests(PortalTestCase):
    """Denied calls answer 401 and never reach the handler."""

    def test_anonymous_gets_generic_401(self):
        for url in ("/auth/me", "/admin/users", "/docent/counts", "/student/counts"):
            resp = self.client.get(url)
            self.assertEqual(resp.status_code, 401, url)
            self.assertEqual(resp.json(), {"error": "Unauthorized"})

    def test_wrong_role_gets_the_same_answer(self):
        student = self.make_user("s@student.pxl.be")
        self.client.force_login(student)
        resp = self.client.get("/admin/users")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"error": "Unauthorized"})

    def test_inactive_user_with_session_is_denied(self):
        admin = self.make_user("a@pxl.be", Role.ADMIN)
        self.client.force_login(admin)
        admin.is_active = False
        admin.save()
        self.assertEqual(self.client.get("/admin/users").status_code, 401)


class CsrfEnforcementTests(PortalTestCase):
    """Writes with CSRF checks switched on, as a browser sends them."""

    def setUp(self):
        self.csrf_client = Client(enforce_csrf_checks=True)
        self.admin = self.make_user("admin@pxl.be", Role.ADMIN)
        self.activiteit = self.make_activiteit(self.admin, status=Activiteit.Status.CONCEPT)
        self.url = f"/admin/activiteiten/{self.activiteit.pk}/status"
        self.body = json.dumps({"status": "goedgekeurd"})

    def patch(self, **extra):
        return self.csrf_client.patch(
            self.url, self.body, content_type="application/json", **extra
        )

    def test_anonymous_write_is_unauthorized_before_csrf(self):
        resp = self.patch()
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"error": "Unauthorized"})
        self.activiteit.refresh_from_db()
        self.assertEqual(self.activiteit.status, Activiteit.Status.CONCEPT)

    def test_wrong_role_is_unauthorized_before_csrf(self):
        self.csrf_client.force_login(self.make_user("s@student.pxl.be"))
        resp = self.patch()
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"error": "Unauthorized"})

    def test_missing_token_is_a_json_403(self):
        self.csrf_client.force_login(self.admin)
        resp = self.patch()
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json(), {"error": "CSRF-verificatie mislukt"})
        self.activiteit.refresh_from_db()
        self.assertEqual(self.activiteit.status, Activiteit.Status.CONCEPT)

    def test_write_with_token_succeeds(self):
        self.csrf_client.force_login(self.admin)
        token = self.csrf_client.get("/auth/csrf").json()["csrfToken"]
        resp = self.patch(HTTP_X_CSRFTOKEN=token)
        self.assertEqual(resp.status_code, 200)
        self.activiteit.refresh_from_db()
        self.assertEqual(self.activiteit.status, Activiteit.Status.GOEDGEKEURD)
