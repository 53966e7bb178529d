# bewijsstukken/services.py
"""
Domain operations of the proof-of-participation workflow.

A student uploads one or more files for an enrollment, then submits
them (``bewijs_status`` becomes ``ingediend``). A docent of the
student's program approves or rejects the submission. Approval marks
the participation as effective, which makes the hours count on the
scorekaart.
"""

from django.db import transaction
from django.utils import timezone

from accounts.roles import Role
from activiteiten.models import Activiteit, Inschrijving
from opleidingen.scope import resolve_program_scope, resolve_review_scope
from pxl_activiteiten.api import get_or_404, parse_id
from pxl_activiteiten.exceptions import NotFound, ValidationFailed
from .models import Bewijsstuk

BewijsStatus = Inschrijving.BewijsStatus

#: Activity statuses for which proofs may be submitted
INDIENBARE_STATUSSEN = (Activiteit.Status.GOEDGEKEURD, Activiteit.Status.GEPUBLICEERD)

#: Review actions and the proof status they lead to
ACTIES = {
    "goedkeuren": BewijsStatus.GOEDGEKEURD,
    "afkeuren": BewijsStatus.AFGEKEURD,
}


def upload_target(caller, inschrijving_id=None, activiteit_id=None) -> Inschrijving:
    """
    Resolve the enrollment an uploaded file belongs to.

    Parameters
    ----------
    caller : Caller
        The uploading user.
    inschrijving_id : int, optional
        Existing enrollment; must be owned by the caller unless the
        caller is an administrator.
    activiteit_id : int, optional
        Student request of the caller. The caller's enrollment for it
        is looked up, or created with ``effectieve_deelname`` set when
        the request is already approved.

    Raises
    ------
    ValidationFailed
        If neither id is given.
    NotFound
        If the target does not exist or is not the caller's.
    """
    is_admin = caller.role == Role.ADMIN
    if inschrijving_id:
        inschrijving_id = parse_id(inschrijving_id, "Ongeldig inschrijving ID")
        qs = Inschrijving.objects.all()
        if not is_admin:
            qs = qs.filter(student=caller.user)
        return get_or_404(qs, "Inschrijving niet gevonden", pk=inschrijving_id)

    if activiteit_id:
        activiteit_id = parse_id(activiteit_id, "Ongeldig activiteit ID")
        qs = Activiteit.objects.all()
        if not is_admin:
            qs = qs.filter(aangemaakt_door=caller.user)
        activiteit = get_or_404(qs, "Activiteit niet gevonden", pk=activiteit_id)
        inschrijving, _ = Inschrijving.objects.get_or_create(
            activiteit=activiteit,
            student=caller.user,
            defaults={
                "inschrijvingsstatus": Inschrijving.Status.INGESCHREVEN,
                "effectieve_deelname": activiteit.status == Activiteit.Status.GOEDGEKEURD,
            },
        )
        return inschrijving

    raise ValidationFailed("inschrijvingId of activiteitId is verplicht")


@transaction.atomic
def store_bewijsstuk(caller, cleaned_data, inschrijving_id=None, activiteit_id=None) -> Bewijsstuk:
    """Attach a validated upload to the enrollment resolved for the caller."""
    inschrijving = upload_target(caller, inschrijving_id, activiteit_id)
    bestand = cleaned_data["file"]
    return Bewijsstuk.objects.create(
        inschrijving=inschrijving,
        type=cleaned_data["type"],
        bestandsnaam=bestand.name,
        bestand=bestand,
    )


def visible_bewijsstukken(caller, inschrijving_id=None, activiteit_id=None):
    """
    Proof files the caller may list, newest first.

    Docenten and administrators see every file of the enrollment or
    activity; a student only sees the files of their own enrollment.

    Raises
    ------
    ValidationFailed
        If neither id is given.
    NotFound
        If a student asks for an enrollment that is not theirs.
    """
    qs = Bewijsstuk.objects.order_by("-uploaded_at")
    is_student = caller.role == Role.STUDENT
    if inschrijving_id:
        inschrijving_id = parse_id(inschrijving_id, "Ongeldig inschrijving ID")
        inschrijvingen = Inschrijving.objects.all()
        if is_student:
            inschrijvingen = inschrijvingen.filter(student=caller.user)
        get_or_404(inschrijvingen, "Inschrijving niet gevonden", pk=inschrijving_id)
        return qs.filter(inschrijving_id=inschrijving_id)

    if activiteit_id:
        activiteit_id = parse_id(activiteit_id, "Ongeldig activiteit ID")
        qs = qs.filter(inschrijving__activiteit_id=activiteit_id)
        if is_student:
            qs = qs.filter(inschrijving__student=caller.user)
        return qs

    raise ValidationFailed("inschrijvingId of activiteitId is verplicht")


def get_bewijsstuk(caller, pk: int, for_delete: bool = False) -> Bewijsstuk:
    """
    Fetch a single proof file the caller has access to.

    Reading is open to the owning student, docenten and administrators;
    deleting only to the owner and administrators.
    """
    qs = Bewijsstuk.objects.select_related("inschrijving")
    if caller.role == Role.STUDENT or (for_delete and caller.role != Role.ADMIN):
        qs = qs.filter(inschrijving__student=caller.user)
    return get_or_404(qs, "Bewijsstuk niet gevonden", pk=pk)


def delete_bewijsstuk(bewijsstuk) -> None:
    """Remove the stored file and the row."""
    bewijsstuk.bestand.delete(save=False)
    bewijsstuk.delete()


def submit_bewijs(student, inschrijving_id) -> Inschrijving:
    """
    Submit the uploaded proofs of an enrollment for review.

    Raises
    ------
    ValidationFailed
        Without id, without any uploaded file, for an activity that
        is not approved or published, or when a submission is already
        waiting for review.
    NotFound
        If the enrollment is not the student's.
    """
    if not inschrijving_id:
        raise ValidationFailed("inschrijvingId is verplicht")
    inschrijving_id = parse_id(inschrijving_id, "Ongeldig inschrijving ID")
    inschrijving = get_or_404(
        Inschrijving.objects.select_related("activiteit").filter(student=student),
        "Inschrijving niet gevonden",
        pk=inschrijving_id,
    )
    if not inschrijving.bewijsstukken.exists():
        raise ValidationFailed("Upload eerst minimaal één bewijsstuk voordat je indient")
    if inschrijving.activiteit.status not in INDIENBARE_STATUSSEN:
        raise ValidationFailed(
            "Je kunt alleen bewijsstukken indienen voor goedgekeurde activiteiten"
        )
    if inschrijving.bewijs_status == BewijsStatus.INGEDIEND:
        raise ValidationFailed("Bewijsstukken zijn al ingediend en wachten op goedkeuring")

    inschrijving.bewijs_status = BewijsStatus.INGEDIEND
    inschrijving.bewijs_ingediend_op = timezone.now()
    inschrijving.bewijs_feedback = None
    inschrijving.save(update_fields=["bewijs_status", "bewijs_ingediend_op", "bewijs_feedback"])
    return inschrijving


def review_queue(docent):
    """Submitted proofs in the docent's program scope, oldest submission first."""
    scope = resolve_program_scope(docent)
    return (
        Inschrijving.objects.select_related(
            "activiteit__opleiding",
            "activiteit__aangemaakt_door__profile",
            "student__profile__opleiding",
        )
        .prefetch_related("bewijsstukken")
        .filter(scope.filter("student__profile__opleiding"))
        .filter(bewijs_status=BewijsStatus.INGEDIEND)
        .order_by("bewijs_ingediend_op")
    )


def review_bewijs(caller, inschrijving_id: int, actie, feedback=None) -> Inschrijving:
    """
    Approve or reject the submitted proofs of an enrollment.

    A student without a program can be reviewed by every docent. For
    other students the program must lie in the caller's review scope,
    which is empty for a docent without program links.

    Raises
    ------
    ValidationFailed
        If ``actie`` is unknown or nothing is waiting for review.
    NotFound
        If the enrollment does not exist or the student lies outside
        the docent's program scope.
    """
    if actie not in ACTIES:
        raise ValidationFailed('Ongeldige actie. Gebruik "goedkeuren" of "afkeuren"')
    inschrijving = get_or_404(
        Inschrijving.objects.select_related("student__profile"),
        "Inschrijving niet gevonden",
        pk=inschrijving_id,
    )
    if inschrijving.bewijs_status != BewijsStatus.INGEDIEND:
        raise ValidationFailed("Er zijn geen bewijsstukken ingediend om te beoordelen")
    opleiding_id = inschrijving.student.profile.opleiding_id
    if opleiding_id is not None and not resolve_review_scope(caller).allows(opleiding_id):
        raise NotFound("Inschrijving niet gevonden of geen toegang")

    inschrijving.bewijs_status = ACTIES[actie]
    inschrijving.bewijs_beoordeeld_op = timezone.now()
    inschrijving.bewijs_feedback = feedback or None
    fields = ["bewijs_status", "bewijs_beoordeeld_op", "bewijs_feedback"]
    if actie == "goedkeuren":
        inschrijving.effectieve_deelname = True
        fields.append("effectieve_deelname")
    else:
        inschrijving.bewijs_afgekeurd_bekeken_op = None
        fields.append("bewijs_afgekeurd_bekeken_op")
    inschrijving.save(update_fields=fields)
    return inschrijving


def mark_bewijs_afkeuringen_bekeken(student) -> int:
    """Acknowledge every unread proof rejection of the student."""
    return Inschrijving.objects.filter(
        student=student,
        bewijs_status=BewijsStatus.AFGEKEURD,
        bewijs_afgekeurd_bekeken_op__isnull=True,
    ).update(bewijs_afgekeurd_bekeken_op=timezone.now())
