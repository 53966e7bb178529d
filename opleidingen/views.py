# opleidingen/views.py
"""
Program management views for administrators.

Besides plain create/update/delete, administrators list the
students and docenten of a program and replace the set of docenten
linked to it.
"""

from django.contrib.auth.models import User
from django.db import transaction
from django.http import JsonResponse

from accounts.roles import ADMIN_ONLY, Role
from accounts.serializers import user_summary
from monitoring.html_logger import info
from pxl_activiteiten.api import ApiView, get_or_404, parse_json, validated
from pxl_activiteiten.exceptions import ValidationFailed
from .forms import OpleidingForm
from .models import DocentOpleiding, Opleiding
from .serializers import opleiding_detail, opleiding_summary

OPLEIDING_NOT_FOUND = "Opleiding niet gevonden"


def _form_data(payload: dict, instance=None) -> dict:
    """
    Map a JSON payload onto :class:`OpleidingForm` fields.

    Missing flags keep the value of ``instance``; a new program is
    active and without automatic approval.
    """
    actief = payload.get("actief")
    if actief is None:
        actief = instance.actief if instance is not None else True
    auto = payload.get("autoGoedkeuringStudentActiviteiten")
    if auto is None:
        auto = instance.auto_goedkeuring_student_activiteiten if instance is not None else False
    return {
        "naam": payload.get("naam"),
        "code": payload.get("code"),
        "beschrijving": payload.get("beschrijving") or "",
        "actief": bool(actief),
        "auto_goedkeuring_student_activiteiten": bool(auto),
    }


def list_program_users(opleiding_id: int) -> dict:
    """
    Return the students and docenten of a program.

    Students are the users with role ``student`` whose home program
    is ``opleiding_id``, active or not. Docenten are the users linked
    through DocentOpleiding. Both lists are ordered by name.

    Parameters
    ----------
    opleiding_id : int
        Primary key of the program.

    Returns
    -------
    dict
        ``{"studenten": [...], "docenten": [...]}`` of user summaries.
    """
    studenten = (
        User.objects.select_related("profile")
        .filter(profile__role=Role.STUDENT, profile__opleiding_id=opleiding_id)
        .order_by("profile__naam")
    )
    docenten = (
        User.objects.select_related("profile")
        .filter(docent_opleidingen__opleiding_id=opleiding_id)
        .order_by("profile__naam")
    )
    return {
        "studenten": [user_summary(u) for u in studenten],
        "docenten": [user_summary(u) for u in docenten],
    }


class OpleidingCollectionView(ApiView):
    """List programs and create new ones."""

    allowed_roles = ADMIN_ONLY
    error_messages = {
        "post": "Er is een fout opgetreden bij het aanmaken van de opleiding",
    }

    def get(self, request):
        return JsonResponse(
            {"opleidingen": [opleiding_detail(o) for o in Opleiding.objects.all()]}
        )

    def post(self, request):
        form = OpleidingForm(_form_data(parse_json(request)))
        validated(form)
        opleiding = form.save()
        info(f"Opleiding {opleiding.code} aangemaakt door admin {self.caller.id}.")
        return JsonResponse({"success": True, "opleiding": opleiding_summary(opleiding)})


class OpleidingDetailView(ApiView):
    """Read, update or delete a program."""

    allowed_roles = ADMIN_ONLY
    error_messages = {
        "patch": "Er is een fout opgetreden bij het bijwerken van de opleiding",
        "delete": "Er is een fout opgetreden bij het verwijderen van de opleiding",
    }

    def get(self, request, pk):
        opleiding = get_or_404(Opleiding, OPLEIDING_NOT_FOUND, pk=pk)
        return JsonResponse({"opleiding": opleiding_detail(opleiding)})

    def patch(self, request, pk):
        payload = parse_json(request)
        opleiding = get_or_404(Opleiding, OPLEIDING_NOT_FOUND, pk=pk)
        form = OpleidingForm(_form_data(payload, opleiding), instance=opleiding)
        validated(form)
        opleiding = form.save()
        info(f"Opleiding {opleiding.code} bijgewerkt door admin {self.caller.id}.")
        return JsonResponse({"success": True, "opleiding": opleiding_summary(opleiding)})

    def delete(self, request, pk):
        opleiding = get_or_404(Opleiding, OPLEIDING_NOT_FOUND, pk=pk)
        if (
            opleiding.studenten.exists()
            or opleiding.docent_koppelingen.exists()
            or opleiding.activiteiten.exists()
        ):
            raise ValidationFailed(
                "Deze opleiding kan niet worden verwijderd omdat er nog studenten, "
                "docenten of activiteiten aan gekoppeld zijn"
            )
        opleiding.delete()
        info(f"Opleiding {pk} verwijderd door admin {self.caller.id}.")
        return JsonResponse({"success": True, "message": "Opleiding succesvol verwijderd"})


class OpleidingUsersView(ApiView):
    """List the students and docenten of a program."""

    allowed_roles = ADMIN_ONLY

    def get(self, request, pk):
        return JsonResponse(list_program_users(pk))


class OpleidingDocentenView(ApiView):
    """
    Replace the docenten linked to a program.

    Payload: ``{"docentIds": [...], "coordinatorIds": [...]}``. Every id
    must belong to a user with role ``docent``.
    """

    allowed_roles = ADMIN_ONLY
    error_message = "Er is een fout opgetreden bij het koppelen van de docenten"

    def put(self, request, pk):
        payload = parse_json(request)
        opleiding = get_or_404(Opleiding, OPLEIDING_NOT_FOUND, pk=pk)
        docent_ids = payload.get("docentIds")
        coordinator_ids = payload.get("coordinatorIds") or []
        if (
            not isinstance(docent_ids, list)
            or not isinstance(coordinator_ids, list)
            or not all(isinstance(i, int) for i in docent_ids + coordinator_ids)
        ):
            raise ValidationFailed("Ongeldige lijst van docenten")

        wanted = set(docent_ids)
        docenten = User.objects.filter(pk__in=wanted, profile__role=Role.DOCENT)
        if docenten.count() != len(wanted):
            raise ValidationFailed("Ongeldige docent")

        with transaction.atomic():
            opleiding.docent_koppelingen.all().delete()
            DocentOpleiding.objects.bulk_create(
                DocentOpleiding(
                    docent=docent,
                    opleiding=opleiding,
                    is_coordinator=docent.pk in coordinator_ids,
                )
                for docent in docenten
            )
        info(f"Docenten van opleiding {opleiding.code} gewijzigd door admin {self.caller.id}.")
        return JsonResponse(
            {"success": True, "docenten": list_program_users(opleiding.pk)["docenten"]}
        )
