# activiteiten/views_admin.py
"""
Activity management views for administrators.
"""

from django.http import JsonResponse

from accounts.roles import ADMIN_ONLY
from monitoring.html_logger import info
from pxl_activiteiten.api import ApiView, get_or_404, parse_json, validated
from .forms import ActiviteitForm, activiteit_form_data
from .models import Activiteit
from .serializers import activiteit_detail, activiteit_summary
from .services import save_activiteit, update_activity_status
from .validators import validate_status

ACTIVITEIT_NOT_FOUND = "Activiteit niet gevonden"


def activiteiten():
    return Activiteit.objects.select_related("opleiding", "aangemaakt_door__profile")


class AdminActiviteitCollectionView(ApiView):
    """List every activity (optionally by ``?status=``) and create new ones."""

    allowed_roles = ADMIN_ONLY
    error_messages = {
        "post": "Er is een fout opgetreden bij het aanmaken van de activiteit",
    }

    def get(self, request):
        qs = activiteiten()
        status = request.GET.get("status")
        if status:
            qs = qs.filter(status=validate_status(status))
        return JsonResponse({"activiteiten": [activiteit_detail(a) for a in qs]})

    def post(self, request):
        payload = parse_json(request)
        form = ActiviteitForm(activiteit_form_data(payload))
        validated(form)
        activiteit = save_activiteit(
            form,
            maker=self.caller.user,
            status=payload.get("status") or Activiteit.Status.GEPUBLICEERD,
        )
        info(f"Activiteit {activiteit.pk} aangemaakt door admin {self.caller.id}.")
        return JsonResponse(
            {"success": True, "activiteit": {"id": activiteit.pk, "titel": activiteit.titel}}
        )


class AdminActiviteitDetailView(ApiView):
    """Read, update or delete any activity."""

    allowed_roles = ADMIN_ONLY
    error_messages = {
        "patch": "Er is een fout opgetreden bij het bijwerken van de activiteit",
        "delete": "Er is een fout opgetreden bij het verwijderen van de activiteit",
    }

    def get(self, request, pk):
        activiteit = get_or_404(activiteiten(), ACTIVITEIT_NOT_FOUND, pk=pk)
        return JsonResponse({"activiteit": activiteit_detail(activiteit)})

    def patch(self, request, pk):
        payload = parse_json(request)
        activiteit = get_or_404(Activiteit, ACTIVITEIT_NOT_FOUND, pk=pk)
        form = ActiviteitForm(activiteit_form_data(payload, activiteit), instance=activiteit)
        validated(form)
        activiteit = save_activiteit(form, status=payload.get("status") or None)
        info(f"Activiteit {activiteit.pk} bijgewerkt door admin {self.caller.id}.")
        return JsonResponse(
            {"success": True, "activiteit": {"id": activiteit.pk, "titel": activiteit.titel}}
        )

    def delete(self, request, pk):
        activiteit = get_or_404(Activiteit, ACTIVITEIT_NOT_FOUND, pk=pk)
        activiteit.delete()
        info(f"Activiteit {pk} verwijderd door admin {self.caller.id}.")
        return JsonResponse({"success": True, "message": "Activiteit succesvol verwijderd"})


class ActiviteitStatusView(ApiView):
    """
    Change the status of an activity.

    Body: ``{"status": ..., "opmerkingen": ...}``. Answers
    ``{"success": true, "activiteit": {"id", "titel", "status"}}``.
    """

    allowed_roles = ADMIN_ONLY
    error_message = "Er is een fout opgetreden bij het wijzigen van de status"

    def patch(self, request, pk):
        payload = parse_json(request)
        activiteit = update_activity_status(
            pk, payload.get("status"), payload.get("opmerkingen")
        )
        info(
            f"Status van activiteit {activiteit.pk} gewijzigd naar {activiteit.status} "
            f"door admin {self.caller.id}."
        )
        return JsonResponse({"success": True, "activiteit": activiteit_summary(activiteit)})
