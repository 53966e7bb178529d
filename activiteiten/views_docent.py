# activiteiten/views_docent.py
"""
Docent-facing views of the activiteiten application.

Docenten manage the activities they created, record participation
in them, and review the requests of students in their program
scope. Administrators may call every view in this module as well.
"""

from django.contrib.auth.models import User
from django.db.models import Prefetch
from django.http import JsonResponse

from accounts.roles import DOCENT_OR_ADMIN, Role
from monitoring.html_logger import info
from opleidingen.scope import resolve_program_scope, resolve_review_scope
from pxl_activiteiten.api import ApiView, get_or_404, parse_json, validated
from .forms import ActiviteitForm, activiteit_form_data
from .models import Activiteit, Inschrijving
from .scorekaart import bereken_scorekaart
from .serializers import activiteit_detail, inschrijving_data
from .services import docent_counts, review_aanvraag, save_activiteit, update_participation
from .validators import validate_status
from .views_admin import activiteiten

NO_ACCESS = "Activiteit niet gevonden of geen toegang"


def _met_inschrijvingen(activiteit) -> dict:
    data = activiteit_detail(activiteit)
    data["inschrijvingen"] = [
        inschrijving_data(i, student=True) for i in activiteit.inschrijvingen.all()
    ]
    return data


def _eigen_activiteiten(user):
    return activiteiten().filter(aangemaakt_door=user).prefetch_related(
        Prefetch(
            "inschrijvingen",
            queryset=Inschrijving.objects.select_related(
                "student__profile__opleiding"
            ),
        )
    )


class DocentCountsView(ApiView):
    """Pending requests and proofs within the caller's program scope."""

    allowed_roles = DOCENT_OR_ADMIN

    def get(self, request):
        return JsonResponse(docent_counts(self.caller.user))


class DocentInschrijvingView(ApiView):
    """
    Record the effective participation of an enrollment.

    Only enrollments of activities created by the caller are found.
    """

    allowed_roles = DOCENT_OR_ADMIN

    def patch(self, request, pk):
        payload = parse_json(request)
        inschrijving = update_participation(self.caller.user, pk, payload)
        info(
            f"Effectieve deelname van inschrijving {inschrijving.pk} gezet op "
            f"{inschrijving.effectieve_deelname} door {self.caller.id}."
        )
        return JsonResponse({"success": True, "inschrijving": inschrijving_data(inschrijving)})


class DocentActiviteitCollectionView(ApiView):
    """List and create the caller's own activities."""

    allowed_roles = DOCENT_OR_ADMIN
    error_messages = {
        "post": "Er is een fout opgetreden bij het aanmaken van de activiteit",
    }

    def get(self, request):
        qs = _eigen_activiteiten(self.caller.user).order_by("-datum")
        return JsonResponse({"activiteiten": [_met_inschrijvingen(a) for a in qs]})

    def post(self, request):
        payload = parse_json(request)
        form = ActiviteitForm(activiteit_form_data(payload))
        validated(form)
        activiteit = save_activiteit(
            form,
            maker=self.caller.user,
            status=payload.get("status") or Activiteit.Status.GEPUBLICEERD,
        )
        info(f"Activiteit {activiteit.pk} aangemaakt door docent {self.caller.id}.")
        return JsonResponse(
            {"success": True, "activiteit": {"id": activiteit.pk, "titel": activiteit.titel}}
        )


class DocentActiviteitDetailView(ApiView):
    """Read, update or delete one of the caller's own activities."""

    allowed_roles = DOCENT_OR_ADMIN
    error_messages = {
        "patch": "Er is een fout opgetreden bij het bijwerken van de activiteit",
        "delete": "Er is een fout opgetreden bij het verwijderen van de activiteit",
    }

    def get(self, request, pk):
        activiteit = get_or_404(_eigen_activiteiten(self.caller.user), NO_ACCESS, pk=pk)
        return JsonResponse({"activiteit": _met_inschrijvingen(activiteit)})

    def patch(self, request, pk):
        activiteit = get_or_404(
            Activiteit.objects.filter(aangemaakt_door=self.caller.user), NO_ACCESS, pk=pk
        )
        payload = parse_json(request)
        form = ActiviteitForm(activiteit_form_data(payload, activiteit), instance=activiteit)
        validated(form)
        activiteit = save_activiteit(form, status=payload.get("status") or None)
        info(f"Activiteit {activiteit.pk} bijgewerkt door docent {self.caller.id}.")
        return JsonResponse(
            {"success": True, "activiteit": {"id": activiteit.pk, "titel": activiteit.titel}}
        )

    def delete(self, request, pk):
        activiteit = get_or_404(
            Activiteit.objects.filter(aangemaakt_door=self.caller.user), NO_ACCESS, pk=pk
        )
        activiteit.delete()
        info(f"Activiteit {pk} verwijderd door docent {self.caller.id}.")
        return JsonResponse({"success": True})


class DocentAanvraagCollectionView(ApiView):
    """Student requests within the caller's program scope, newest first."""

    allowed_roles = DOCENT_OR_ADMIN

    def get(self, request):
        scope = resolve_program_scope(self.caller.user)
        qs = activiteiten().filter(
            scope.filter("opleiding"), type_aanvraag=Activiteit.TypeAanvraag.STUDENT
        )
        status = request.GET.get("status")
        if status:
            qs = qs.filter(status=validate_status(status))
        qs = qs.order_by("-created_at")
        return JsonResponse({"aanvragen": [activiteit_detail(a) for a in qs]})


class DocentAanvraagDetailView(ApiView):
    """Read or review a single student request."""

    allowed_roles = DOCENT_OR_ADMIN

    def get(self, request, pk):
        scope = resolve_review_scope(self.caller)
        aanvraag = get_or_404(
            activiteiten().filter(scope.filter("opleiding")),
            "Aanvraag niet gevonden of geen toegang",
            pk=pk,
            type_aanvraag=Activiteit.TypeAanvraag.STUDENT,
        )
        return JsonResponse({"aanvraag": activiteit_detail(aanvraag)})

    def patch(self, request, pk):
        payload = parse_json(request)
        aanvraag = review_aanvraag(
            self.caller, pk, payload.get("status"), payload.get("opmerkingen")
        )
        info(f"Aanvraag {aanvraag.pk} {aanvraag.status} door {self.caller.id}.")
        return JsonResponse(
            {"success": True, "aanvraag": {"id": aanvraag.pk, "status": aanvraag.status}}
        )


def _studenten_in_scope(user):
    scope = resolve_program_scope(user)
    return (
        User.objects.select_related("profile__opleiding")
        .filter(scope.filter("profile__opleiding"), profile__role=Role.STUDENT)
        .order_by("profile__naam")
    )


class DocentStudentenView(ApiView):
    """Students of the programs in the caller's scope."""

    allowed_roles = DOCENT_OR_ADMIN

    def get(self, request):
        studenten = []
        for user in _studenten_in_scope(self.caller.user):
            opleiding = user.profile.opleiding
            studenten.append(
                {
                    "id": user.pk,
                    "naam": user.profile.naam,
                    "email": user.email,
                    "actief": user.is_active,
                    "opleiding": opleiding.naam if opleiding else None,
                }
            )
        return JsonResponse({"studenten": studenten})


class DocentStudentScorekaartView(ApiView):
    """Scorekaart of a student in the caller's scope."""

    allowed_roles = DOCENT_OR_ADMIN

    def get(self, request, pk):
        student = get_or_404(
            _studenten_in_scope(self.caller.user), "Student niet gevonden of geen toegang", pk=pk
        )
        kaart = bereken_scorekaart(student)
        kaart["student"] = {"id": student.pk, "naam": student.profile.naam}
        return JsonResponse(kaart)
