# bewijsstukken/views.py
"""
Views for the bewijsstukken application.

This module exposes the upload endpoints shared by every role, the
student's submission of proofs and the docent's review queue.
"""

from django.http import JsonResponse

from accounts.roles import ALL_ROLES, DOCENT_OR_ADMIN, STUDENT_ONLY
from activiteiten.models import Inschrijving
from monitoring.html_logger import info
from pxl_activiteiten.api import ApiView, get_or_404, parse_json, validated
from .forms import BewijsstukUploadForm
from .serializers import bewijsstuk_data, inschrijving_met_bewijzen
from .services import (
    delete_bewijsstuk,
    get_bewijsstuk,
    mark_bewijs_afkeuringen_bekeken,
    review_bewijs,
    review_queue,
    store_bewijsstuk,
    submit_bewijs,
    visible_bewijsstukken,
)


def _met_bewijzen():
    return Inschrijving.objects.select_related(
        "activiteit__opleiding",
        "activiteit__aangemaakt_door__profile",
        "student__profile__opleiding",
    ).prefetch_related("bewijsstukken")


class BewijsstukCollectionView(ApiView):
    """
    Upload a proof file or list the files of an enrollment or activity.

    The target is given as ``inschrijvingId`` or ``activiteitId``, in
    the multipart body for uploads and in the query string for lists.
    """

    allowed_roles = ALL_ROLES
    error_messages = {"post": "Er is een fout opgetreden bij het uploaden"}

    def get(self, request):
        bewijsstukken = visible_bewijsstukken(
            self.caller,
            inschrijving_id=request.GET.get("inschrijvingId"),
            activiteit_id=request.GET.get("activiteitId"),
        )
        return JsonResponse([bewijsstuk_data(b) for b in bewijsstukken], safe=False)

    def post(self, request):
        form = BewijsstukUploadForm(request.POST, request.FILES)
        cleaned = validated(form)
        bewijsstuk = store_bewijsstuk(
            self.caller,
            cleaned,
            inschrijving_id=request.POST.get("inschrijvingId"),
            activiteit_id=request.POST.get("activiteitId"),
        )
        info(
            f"Bewijsstuk {bewijsstuk.pk} ({bewijsstuk.bestandsnaam}) geüpload door "
            f"gebruiker {self.caller.id} voor inschrijving {bewijsstuk.inschrijving_id}."
        )
        return JsonResponse(bewijsstuk_data(bewijsstuk), status=201)


class BewijsstukDetailView(ApiView):
    """Read or delete a single proof file."""

    allowed_roles = ALL_ROLES

    def get(self, request, pk):
        return JsonResponse(bewijsstuk_data(get_bewijsstuk(self.caller, pk)))

    def delete(self, request, pk):
        bewijsstuk = get_bewijsstuk(self.caller, pk, for_delete=True)
        delete_bewijsstuk(bewijsstuk)
        info(f"Bewijsstuk {pk} verwijderd door gebruiker {self.caller.id}.")
        return JsonResponse({"success": True})


class StudentBewijsView(ApiView):
    """
    The student's enrollments with their proofs.

    Reading the list acknowledges the proof rejections it contains.
    """

    allowed_roles = STUDENT_ONLY

    def get(self, request):
        qs = _met_bewijzen().filter(student=self.caller.user)
        inschrijvingen = [inschrijving_met_bewijzen(i) for i in qs]
        mark_bewijs_afkeuringen_bekeken(self.caller.user)
        return JsonResponse({"inschrijvingen": inschrijvingen})


class StudentIndienenView(ApiView):
    """Submit the uploaded proofs of an enrollment for review."""

    allowed_roles = STUDENT_ONLY

    def post(self, request):
        payload = parse_json(request)
        inschrijving = submit_bewijs(self.caller.user, payload.get("inschrijvingId"))
        info(f"Bewijsstukken ingediend door student {self.caller.id} voor inschrijving {inschrijving.pk}.")
        return JsonResponse(inschrijving_met_bewijzen(_met_bewijzen().get(pk=inschrijving.pk)))


class DocentBewijsCollectionView(ApiView):
    """Submitted proofs waiting for review, oldest submission first."""

    allowed_roles = DOCENT_OR_ADMIN

    def get(self, request):
        qs = review_queue(self.caller.user)
        return JsonResponse(
            {"inschrijvingen": [inschrijving_met_bewijzen(i, student=True) for i in qs]}
        )


class DocentBewijsDetailView(ApiView):
    """
    Read or review the proofs of one enrollment.

    PATCH expects ``{"actie": "goedkeuren" | "afkeuren", "feedback": ...}``.
    """

    allowed_roles = DOCENT_OR_ADMIN

    def get(self, request, pk):
        inschrijving = get_or_404(_met_bewijzen(), "Inschrijving niet gevonden", pk=pk)
        return JsonResponse(inschrijving_met_bewijzen(inschrijving, student=True))

    def patch(self, request, pk):
        payload = parse_json(request)
        inschrijving = review_bewijs(
            self.caller, pk, payload.get("actie"), payload.get("feedback")
        )
        info(
            f"Bewijsstukken van inschrijving {pk} beoordeeld door {self.caller.id}: "
            f"{inschrijving.bewijs_status}."
        )
        return JsonResponse(
            inschrijving_met_bewijzen(_met_bewijzen().get(pk=pk), student=True)
        )
