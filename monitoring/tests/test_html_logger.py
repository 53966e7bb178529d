# monitoring/tests/test_html_logger.py
"""
Tests for the HTML application log and its viewer.
"""

from accounts.roles import Role
from monitoring import html_logger
from pxl_activiteiten.testing import PortalTestCase


class HtmlLoggerTests(PortalTestCase):
    def setUp(self):
        path = html_logger.log_file()
        if path.exists():
            path.unlink()

    def test_entries_are_escaped_and_appended(self):
        html_logger.info("Login user=1.")
        html_logger.warn("<script>alert(1)</script>")
        html_logger.error("Fout")
        content = html_logger.log_file().read_text(encoding="utf-8")
        self.assertTrue(content.startswith("<!doctype html>"))
        self.assertIn('class="log-info"', content)
        self.assertIn("&lt;script&gt;", content)
        self.assertNotIn("<script>", content)
        self.assertIn('class="log-error"', content)

    def test_entries_reach_standard_logging(self):
        with self.assertLogs("pxl_activiteiten.events", level="INFO") as logs:
            html_logger.warn("Mislukte login")
        self.assertEqual(logs.records[0].getMessage(), "Mislukte login")

    def test_viewer_is_admin_only(self):
        admin = self.make_user("admin@pxl.be", Role.ADMIN)
        docent = self.make_user("docent@pxl.be", Role.DOCENT)

        self.client.force_login(docent)
        self.assertEqual(self.client.get("/monitoring/logs").status_code, 401)

        self.client.force_login(admin)
        resp = self.client.get("/monitoring/logs")
        self.assertEqual(resp.status_code, 200)
        self.assertIn("Nog geen logregels.", resp.content.decode())

        html_logger.info("Activiteit 1 aangemaakt")
        resp = self.client.get("/monitoring/logs")
        self.assertIn("Activiteit 1 aangemaakt", resp.content.decode())
