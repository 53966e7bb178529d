# activiteiten/views_student.py
"""
Student-facing views of the activiteiten application.

Every view here is restricted to the student role and only ever
touches rows owned by the calling student.
"""

from django.http import HttpResponse, JsonResponse

from accounts.roles import STUDENT_ONLY
from monitoring.html_logger import info
from pxl_activiteiten.api import ApiView, get_or_404, parse_id, parse_json, validated
from pxl_activiteiten.exceptions import ValidationFailed
from .forms import AANVRAAG_FIELDS, AanvraagForm, activiteit_form_data
from .models import Activiteit, Inschrijving
from .pdf import render_scorekaart_pdf
from .scorekaart import bereken_scorekaart
from .serializers import activiteit_detail, inschrijving_data
from .services import (
    create_aanvraag,
    enroll,
    mark_aanvragen_bekeken,
    open_activiteiten,
    student_counts,
    unenroll,
)
from .views_admin import activiteiten


def _eigen_inschrijvingen(user):
    return Inschrijving.objects.select_related(
        "activiteit__opleiding", "activiteit__aangemaakt_door__profile"
    ).filter(student=user)


class StudentCountsView(ApiView):
    """Rejected requests and proofs needing the student's attention."""

    allowed_roles = STUDENT_ONLY

    def get(self, request):
        return JsonResponse(student_counts(self.caller.user))


class StudentAanvraagView(ApiView):
    """
    List and create the student's own activity requests.

    Reading the list acknowledges the rejections it contains.
    """

    allowed_roles = STUDENT_ONLY

    def get(self, request):
        qs = activiteiten().filter(
            aangemaakt_door=self.caller.user,
            type_aanvraag=Activiteit.TypeAanvraag.STUDENT,
        ).order_by("-created_at")
        aanvragen = [activiteit_detail(a) for a in qs]
        mark_aanvragen_bekeken(self.caller.user)
        return JsonResponse({"aanvragen": aanvragen})

    def post(self, request):
        payload = parse_json(request)
        form = AanvraagForm(activiteit_form_data(payload, keys=AANVRAAG_FIELDS))
        validated(form)
        aanvraag = create_aanvraag(self.caller.user, self.caller.user.profile, form)
        info(f"Aanvraag {aanvraag.pk} ingediend door student {self.caller.id} ({aanvraag.status}).")
        aanvraag = activiteiten().get(pk=aanvraag.pk)
        return JsonResponse(activiteit_detail(aanvraag), status=201)


class StudentActiviteitenView(ApiView):
    """Published activities open for enrollment."""

    allowed_roles = STUDENT_ONLY

    def get(self, request):
        ingeschreven = set(
            Inschrijving.objects.filter(
                student=self.caller.user,
                inschrijvingsstatus=Inschrijving.Status.INGESCHREVEN,
            ).values_list("activiteit_id", flat=True)
        )
        data = []
        for activiteit in open_activiteiten():
            item = activiteit_detail(activiteit)
            item["ingeschreven"] = activiteit.pk in ingeschreven
            data.append(item)
        return JsonResponse({"activiteiten": data})


class StudentInschrijvingCollectionView(ApiView):
    """List the student's enrollments and enroll in an activity."""

    allowed_roles = STUDENT_ONLY

    def get(self, request):
        qs = _eigen_inschrijvingen(self.caller.user).order_by("-created_at")
        return JsonResponse(
            {"inschrijvingen": [inschrijving_data(i, activiteit=True) for i in qs]}
        )

    def post(self, request):
        payload = parse_json(request)
        activiteit_id = payload.get("activiteitId")
        if not activiteit_id:
            raise ValidationFailed("Activiteit ID is verplicht")
        activiteit_id = parse_id(activiteit_id, "Ongeldig activiteit ID")
        inschrijving, created = enroll(self.caller.user, activiteit_id)
        info(f"Student {self.caller.id} ingeschreven voor activiteit {activiteit_id}.")
        return JsonResponse(inschrijving_data(inschrijving), status=201 if created else 200)


class StudentInschrijvingDetailView(ApiView):
    """Read or cancel one of the student's enrollments."""

    allowed_roles = STUDENT_ONLY

    def get(self, request, pk):
        inschrijving = get_or_404(
            _eigen_inschrijvingen(self.caller.user), "Inschrijving niet gevonden", pk=pk
        )
        return JsonResponse(inschrijving_data(inschrijving, activiteit=True))

    def delete(self, request, pk):
        payload = parse_json(request)
        inschrijving = unenroll(self.caller.user, pk, reden=payload.get("reden"))
        info(f"Student {self.caller.id} uitgeschreven (inschrijving {inschrijving.pk}).")
        return JsonResponse(inschrijving_data(inschrijving))


class StudentScorekaartView(ApiView):
    """Hours earned by the student in the current school year."""

    allowed_roles = STUDENT_ONLY

    def get(self, request):
        return JsonResponse(bereken_scorekaart(self.caller.user))


class StudentScorekaartPdfView(ApiView):
    """The scorekaart as a downloadable PDF."""

    allowed_roles = STUDENT_ONLY
    error_message = "Er is een fout opgetreden bij het aanmaken van de PDF"

    def get(self, request):
        kaart = bereken_scorekaart(self.caller.user)
        pdf = render_scorekaart_pdf(self.caller.user.profile.naam, kaart)
        response = HttpResponse(pdf, content_type="application/pdf")
        response["Content-Disposition"] = (
            f'attachment; filename="scorekaart-{kaart["schooljaar"]}.pdf"'
        )
        return response
