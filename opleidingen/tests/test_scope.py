# opleidingen/tests/test_scope.py
"""
Tests for the program scope of docenten.
"""

from django.db.models import Q

from accounts.roles import Role
from activiteiten.models import Activiteit
from activiteiten.services import docent_counts
from opleidingen.models import DocentOpleiding, Opleiding
from accounts.permissions import Caller
from opleidingen.scope import ProgramScope, resolve_program_scope, resolve_review_scope
from pxl_activiteiten.testing import PortalTestCase


class ProgramScopeTests(PortalTestCase):
    def setUp(self):
        self.bouw = Opleiding.objects.create(naam="Bouw", code="BOUW")
        self.it = Opleiding.objects.create(naam="IT", code="IT")
        self.docent = self.make_user("docent@pxl.be", Role.DOCENT)
        self.lisa = self.make_user("lisa@student.pxl.be", opleiding=self.bouw)
        self.tom = self.make_user("tom@student.pxl.be", opleiding=self.it)
        for student, opleiding in ((self.lisa, self.bouw), (self.tom, self.it)):
            Activiteit.objects.create(
                titel=f"Aanvraag {opleiding.code}",
                type_activiteit="Workshop",
                datum="2025-03-01",
                startuur="09:00",
                einduur="11:00",
                status=Activiteit.Status.IN_REVIEW,
                type_aanvraag=Activiteit.TypeAanvraag.STUDENT,
                aangemaakt_door=student,
                opleiding=opleiding,
            )

    def test_docent_without_links_is_unrestricted(self):
        scope = resolve_program_scope(self.docent)
        self.assertTrue(scope.unrestricted)
        self.assertTrue(scope.allows(self.it.pk))
        self.assertEqual(docent_counts(self.docent)["aanvragen"], 2)

    def test_linked_docent_only_sees_own_programs(self):
        DocentOpleiding.objects.create(docent=self.docent, opleiding=self.bouw)
        scope = resolve_program_scope(self.docent)
        self.assertEqual(scope.opleiding_ids, frozenset({self.bouw.pk}))
        self.assertFalse(scope.allows(self.it.pk))
        self.assertEqual(docent_counts(self.docent)["aanvragen"], 1)

    def test_scope_is_recomputed_on_every_call(self):
        self.assertTrue(resolve_program_scope(self.docent).unrestricted)
        link = DocentOpleiding.objects.create(docent=self.docent, opleiding=self.it)
        self.assertFalse(resolve_program_scope(self.docent).unrestricted)
        link.delete()
        self.assertTrue(resolve_program_scope(self.docent).unrestricted)

    def test_filter_condition(self):
        self.assertEqual(ProgramScope().filter("opleiding"), Q())
        restricted = ProgramScope(frozenset({3, 1}))
        self.assertEqual(restricted.filter("opleiding"), Q(opleiding__in=[1, 3]))
        self.assertEqual(ProgramScope(closed=True).filter("opleiding"), Q(opleiding__in=[]))

    def test_review_scope_is_closed_without_links(self):
        docent = Caller(user=self.docent, role=Role.DOCENT)
        scope = resolve_review_scope(docent)
        self.assertFalse(scope.unrestricted)
        self.assertFalse(scope.allows(self.bouw.pk))
        self.assertFalse(Activiteit.objects.filter(scope.filter("opleiding")).exists())

        DocentOpleiding.objects.create(docent=self.docent, opleiding=self.bouw)
        scope = resolve_review_scope(docent)
        self.assertTrue(scope.allows(self.bouw.pk))
        self.assertFalse(scope.allows(self.it.pk))

    def test_review_scope_of_admin_is_unrestricted(self):
        admin = self.make_user("admin@pxl.be", Role.ADMIN)
        self.assertTrue(resolve_review_scope(Caller(user=admin, role=Role.ADMIN)).unrestricted)
