# activiteiten/services.py
"""
Domain operations of the activiteiten application.

The views only translate HTTP to calls of the functions below and
back. Every function validates its input before the first write;
operations touching more than one row run inside a transaction.
"""

from datetime import date
from typing import Optional, Tuple

from django.db import transaction
from django.db.models import F, Q
from django.utils import timezone

from opleidingen.scope import resolve_program_scope, resolve_review_scope
from pxl_activiteiten.api import get_or_404
from pxl_activiteiten.exceptions import ValidationFailed
from .models import Activiteit, Inschrijving
from .validators import ACTIVITEIT_STATUSSEN, REVIEW_STATUSSEN, validate_status

Status = Activiteit.Status
BewijsStatus = Inschrijving.BewijsStatus

#: Activity statuses for which a missing proof needs the student's attention
BEWIJS_VERWACHT_STATUSSEN = (Status.GEPUBLICEERD, Status.GOEDGEKEURD, Status.AFGEROND)


def update_activity_status(activiteit_id: int, status, opmerkingen=None) -> Activiteit:
    """
    Move an activity to another status.

    The status is validated before the activity is looked up, so an
    invalid status is reported even for an unknown id. Remarks are
    merged: an absent or empty ``opmerkingen`` keeps the stored text.

    Raises
    ------
    ValidationFailed
        If ``status`` is not one of the six activity statuses.
    NotFound
        If the activity does not exist.
    """
    status = validate_status(status, ACTIVITEIT_STATUSSEN)
    activiteit = get_or_404(Activiteit, "Activiteit niet gevonden", pk=activiteit_id)
    activiteit.status = status
    if opmerkingen:
        activiteit.opmerkingen = opmerkingen
    activiteit.save(update_fields=["status", "opmerkingen", "updated_at"])
    return activiteit


def docent_counts(docent) -> dict:
    """
    Pending work for a docent's dashboard.

    Returns
    -------
    dict
        ``aanvragen``: student requests waiting for review;
        ``bewijsstukken``: submitted proofs waiting for review.
        Both restricted to the docent's program scope.
    """
    scope = resolve_program_scope(docent)
    aanvragen = Activiteit.objects.filter(
        scope.filter("opleiding"),
        type_aanvraag=Activiteit.TypeAanvraag.STUDENT,
        status=Status.IN_REVIEW,
    ).count()
    bewijsstukken = Inschrijving.objects.filter(
        scope.filter("student__profile__opleiding"),
        bewijs_status=BewijsStatus.INGEDIEND,
    ).count()
    return {"aanvragen": aanvragen, "bewijsstukken": bewijsstukken}


def student_counts(student, today: Optional[date] = None) -> dict:
    """
    Items needing a student's attention.

    Parameters
    ----------
    student : User
        The calling student; nothing outside their own rows is counted.
    today : date, optional
        Reference date, defaults to the local date.

    Returns
    -------
    dict
        ``aanvragen``: own requests rejected and not yet seen;
        ``bewijsstukken``: enrollments of past activities without
        proof, plus rejected proofs not yet seen.
    """
    today = today or timezone.localdate()
    aanvragen = Activiteit.objects.filter(
        aangemaakt_door=student,
        type_aanvraag=Activiteit.TypeAanvraag.STUDENT,
        status=Status.AFGEKEURD,
        afgekeurd_bekeken_op__isnull=True,
    ).count()
    bewijs_ontbreekt = Q(
        bewijs_status=BewijsStatus.NIET_INGEDIEND,
        activiteit__datum__lt=today,
        activiteit__status__in=BEWIJS_VERWACHT_STATUSSEN,
    )
    bewijs_afgekeurd = Q(
        bewijs_status=BewijsStatus.AFGEKEURD,
        bewijs_afgekeurd_bekeken_op__isnull=True,
    )
    bewijsstukken = Inschrijving.objects.filter(
        bewijs_ontbreekt | bewijs_afgekeurd, student=student
    ).count()
    return {"aanvragen": aanvragen, "bewijsstukken": bewijsstukken}


def update_participation(owner, inschrijving_id: int, payload: dict) -> Inschrijving:
    """
    Record whether a student actually took part in an activity.

    Only the creator of the activity may do so; the ownership
    condition is part of the lookup, for administrators as well, so
    an enrollment of someone else's activity reads as missing.

    Parameters
    ----------
    owner : User
        The caller.
    inschrijving_id : int
        Target enrollment.
    payload : dict
        Request body; ``effectieveDeelname`` absent or null keeps the
        stored value.

    Raises
    ------
    NotFound
        If the enrollment does not exist or belongs to an activity
        created by somebody else.
    ValidationFailed
        If ``effectieveDeelname`` is neither a boolean nor null.
    """
    inschrijving = get_or_404(
        Inschrijving.objects.select_related("activiteit"),
        "Inschrijving niet gevonden of geen toegang",
        pk=inschrijving_id,
        activiteit__aangemaakt_door=owner,
    )
    waarde = payload.get("effectieveDeelname")
    if waarde is not None and not isinstance(waarde, bool):
        raise ValidationFailed("effectieveDeelname moet true of false zijn")
    if waarde is not None:
        inschrijving.effectieve_deelname = waarde
    inschrijving.save(update_fields=["effectieve_deelname"])
    return inschrijving


def review_aanvraag(caller, activiteit_id: int, status, opmerkingen=None) -> Activiteit:
    """
    Approve or reject a student's activity request.

    The request must lie in the caller's review scope: a docent without
    program links reviews nothing, an admin reviews everything. Remarks
    are replaced, not merged. A rejection is flagged as unread for the
    student.

    Besides the status change, an approval enrolls the student with
    participation already confirmed, as automatic approval in
    :func:`create_aanvraag` does. Without that enrollment a manually
    approved request could not receive proofs or count on the
    scorekaart.

    Raises
    ------
    NotFound
        If the request does not exist or lies outside the scope.
    ValidationFailed
        If ``status`` is not ``goedgekeurd`` or ``afgekeurd``.
    """
    scope = resolve_review_scope(caller)
    aanvraag = get_or_404(
        Activiteit.objects.filter(scope.filter("opleiding")),
        "Aanvraag niet gevonden of geen toegang",
        pk=activiteit_id,
        type_aanvraag=Activiteit.TypeAanvraag.STUDENT,
    )
    status = validate_status(status, REVIEW_STATUSSEN)

    with transaction.atomic():
        aanvraag.status = status
        aanvraag.opmerkingen = opmerkingen or None
        if status == Status.AFGEKEURD:
            aanvraag.afgekeurd_bekeken_op = None
        aanvraag.save(update_fields=["status", "opmerkingen", "afgekeurd_bekeken_op", "updated_at"])
        if status == Status.GOEDGEKEURD:
            Inschrijving.objects.get_or_create(
                activiteit=aanvraag,
                student_id=aanvraag.aangemaakt_door_id,
                defaults={"effectieve_deelname": True},
            )
    return aanvraag


@transaction.atomic
def create_aanvraag(student, profile, form) -> Activiteit:
    """
    Store a student's activity request.

    The request is approved on the spot, together with an enrollment
    of the student, when the student's program has automatic
    approval; otherwise it waits in ``in_review``.

    Parameters
    ----------
    student : User
        The requesting student.
    profile : UserProfile
        Profile of the student, giving the program.
    form : AanvraagForm
        Validated form holding the descriptive fields.
    """
    opleiding = profile.opleiding
    auto = bool(opleiding and opleiding.auto_goedkeuring_student_activiteiten)

    aanvraag = form.save(commit=False)
    aanvraag.type_aanvraag = Activiteit.TypeAanvraag.STUDENT
    aanvraag.status = Status.GOEDGEKEURD if auto else Status.IN_REVIEW
    aanvraag.aangemaakt_door = student
    aanvraag.opleiding = opleiding
    aanvraag.save()

    if auto:
        Inschrijving.objects.create(
            activiteit=aanvraag, student=student, effectieve_deelname=True
        )
    return aanvraag


def mark_aanvragen_bekeken(student) -> int:
    """Flag the student's rejected requests as seen; return how many changed."""
    return Activiteit.objects.filter(
        aangemaakt_door=student,
        type_aanvraag=Activiteit.TypeAanvraag.STUDENT,
        status=Status.AFGEKEURD,
        afgekeurd_bekeken_op__isnull=True,
    ).update(afgekeurd_bekeken_op=timezone.now())


def open_activiteiten(today: Optional[date] = None):
    """Published activities from today on, soonest first."""
    today = today or timezone.localdate()
    return (
        Activiteit.objects.select_related("opleiding", "aangemaakt_door__profile")
        .filter(status=Status.GEPUBLICEERD, datum__gte=today)
        .order_by("datum", "startuur")
    )


@transaction.atomic
def enroll(student, activiteit_id) -> Tuple[Inschrijving, bool]:
    """
    Enroll a student in a published activity.

    A cancelled enrollment of the same student is reactivated
    instead of duplicated.

    Returns
    -------
    tuple
        The enrollment and whether it was newly created.

    Raises
    ------
    NotFound
        If the activity does not exist.
    ValidationFailed
        If the activity is not published, is full, or the student
        is already enrolled.
    """
    activiteit = get_or_404(
        Activiteit.objects.select_for_update(), "Activiteit niet gevonden", pk=activiteit_id
    )
    if activiteit.status != Status.GEPUBLICEERD:
        raise ValidationFailed("Deze activiteit is niet beschikbaar voor inschrijving")

    inschrijving = Inschrijving.objects.filter(activiteit=activiteit, student=student).first()
    if inschrijving is not None and inschrijving.inschrijvingsstatus == Inschrijving.Status.INGESCHREVEN:
        raise ValidationFailed("Je bent al ingeschreven voor deze activiteit")

    if activiteit.max_plaatsen is not None:
        bezet = activiteit.inschrijvingen.filter(
            inschrijvingsstatus=Inschrijving.Status.INGESCHREVEN
        ).count()
        if bezet >= activiteit.max_plaatsen:
            raise ValidationFailed("Deze activiteit is volzet")

    created = inschrijving is None
    if inschrijving is not None:
        inschrijving.inschrijvingsstatus = Inschrijving.Status.INGESCHREVEN
        inschrijving.uitgeschreven_op = None
        inschrijving.uitschrijf_reden = None
        inschrijving.save(update_fields=["inschrijvingsstatus", "uitgeschreven_op", "uitschrijf_reden"])
    else:
        inschrijving = Inschrijving.objects.create(activiteit=activiteit, student=student)

    Activiteit.objects.filter(pk=activiteit.pk).update(
        aantal_ingeschreven=F("aantal_ingeschreven") + 1
    )
    return inschrijving, created


@transaction.atomic
def unenroll(
    student, inschrijving_id: int, reden: Optional[str] = None, today: Optional[date] = None
) -> Inschrijving:
    """
    Cancel a student's own enrollment.

    Raises
    ------
    NotFound
        If the enrollment does not exist or belongs to somebody else.
    ValidationFailed
        If the enrollment is already cancelled or the activity has
        already taken place.
    """
    today = today or timezone.localdate()
    inschrijving = get_or_404(
        Inschrijving.objects.select_related("activiteit"),
        "Inschrijving niet gevonden",
        pk=inschrijving_id,
        student=student,
    )
    if inschrijving.inschrijvingsstatus == Inschrijving.Status.UITGESCHREVEN:
        raise ValidationFailed("Je bent al uitgeschreven voor deze activiteit")
    if inschrijving.activiteit.datum < today:
        raise ValidationFailed(
            "Je kunt je niet uitschrijven voor een activiteit die al is geweest"
        )

    inschrijving.inschrijvingsstatus = Inschrijving.Status.UITGESCHREVEN
    inschrijving.uitgeschreven_op = timezone.now()
    inschrijving.uitschrijf_reden = reden or None
    inschrijving.save(update_fields=["inschrijvingsstatus", "uitgeschreven_op", "uitschrijf_reden"])

    Activiteit.objects.filter(pk=inschrijving.activiteit_id, aantal_ingeschreven__gt=0).update(
        aantal_ingeschreven=F("aantal_ingeschreven") - 1
    )
    return inschrijving


def save_activiteit(form, maker=None, status=None) -> Activiteit:
    """
    Persist an activity from a validated :class:`ActiviteitForm`.

    Parameters
    ----------
    form : ActiviteitForm
        Validated form, bound to an existing instance on update.
    maker : User, optional
        Creator of a new activity offered by a docent or admin.
    status : str, optional
        Requested status; ``None`` keeps the current one.

    Raises
    ------
    ValidationFailed
        If ``status`` is not one of the six activity statuses.
    """
    if status is not None:
        status = validate_status(status, ACTIVITEIT_STATUSSEN)
    activiteit = form.save(commit=False)
    if status is not None:
        activiteit.status = status
    if maker is not None:
        activiteit.aangemaakt_door = maker
        activiteit.type_aanvraag = Activiteit.TypeAanvraag.DOCENT
    activiteit.save()
    return activiteit
