# activiteiten/serializers.py
"""
JSON projections of activities and enrollments.

Keys follow the camelCase naming of the web client.
"""


def _iso(value):
    return value.isoformat() if value is not None else None


def _uur(value):
    return value.strftime("%H:%M") if value is not None else None


def activiteit_summary(activiteit) -> dict:
    """Minimal projection returned after a status change."""
    return {"id": activiteit.pk, "titel": activiteit.titel, "status": activiteit.status}


def activiteit_detail(activiteit) -> dict:
    """
    Full projection of an activity.

    Returns
    -------
    dict
        All fields, the program (``id``, ``naam``, ``code``) and the
        creator (``id``, ``naam``).
    """
    opleiding = activiteit.opleiding
    maker = activiteit.aangemaakt_door
    return {
        "id": activiteit.pk,
        "titel": activiteit.titel,
        "typeActiviteit": activiteit.type_activiteit,
        "aard": activiteit.aard or None,
        "omschrijving": activiteit.omschrijving or None,
        "datum": _iso(activiteit.datum),
        "startuur": _uur(activiteit.startuur),
        "einduur": _uur(activiteit.einduur),
        "uren": activiteit.uren,
        "locatie": activiteit.locatie or None,
        "weblink": activiteit.weblink or None,
        "organisatorPxl": activiteit.organisator_pxl or None,
        "organisatorExtern": activiteit.organisator_extern or None,
        "bewijslink": activiteit.bewijslink or None,
        "verplichtProfiel": activiteit.verplicht_profiel or None,
        "maxPlaatsen": activiteit.max_plaatsen,
        "aantalIngeschreven": activiteit.aantal_ingeschreven,
        "niveau": activiteit.niveau,
        "status": activiteit.status,
        "typeAanvraag": activiteit.type_aanvraag,
        "opmerkingen": activiteit.opmerkingen,
        "afgekeurdBekekenOp": _iso(activiteit.afgekeurd_bekeken_op),
        "opleidingId": activiteit.opleiding_id,
        "opleiding": (
            {"id": opleiding.pk, "naam": opleiding.naam, "code": opleiding.code}
            if opleiding
            else None
        ),
        "aangemaaktDoorId": activiteit.aangemaakt_door_id,
        "aangemaaktDoor": {"id": maker.pk, "naam": maker.profile.naam},
        "createdAt": _iso(activiteit.created_at),
        "updatedAt": _iso(activiteit.updated_at),
    }


def inschrijving_data(inschrijving, activiteit=False, student=False) -> dict:
    """
    Projection of an enrollment.

    Parameters
    ----------
    inschrijving : Inschrijving
        The enrollment.
    activiteit : bool
        Embed the full activity.
    student : bool
        Embed the student (``id``, ``naam``, ``email``, ``opleiding``).
    """
    data = {
        "id": inschrijving.pk,
        "activiteitId": inschrijving.activiteit_id,
        "studentId": inschrijving.student_id,
        "inschrijvingsstatus": inschrijving.inschrijvingsstatus,
        "uitgeschrevenOp": _iso(inschrijving.uitgeschreven_op),
        "uitschrijfReden": inschrijving.uitschrijf_reden,
        "effectieveDeelname": inschrijving.effectieve_deelname,
        "bewijsStatus": inschrijving.bewijs_status,
        "bewijsIngediendOp": _iso(inschrijving.bewijs_ingediend_op),
        "bewijsBeoordeeldOp": _iso(inschrijving.bewijs_beoordeeld_op),
        "bewijsFeedback": inschrijving.bewijs_feedback,
        "bewijsAfgekeurdBekekenOp": _iso(inschrijving.bewijs_afgekeurd_bekeken_op),
        "createdAt": _iso(inschrijving.created_at),
    }
    if activiteit:
        data["activiteit"] = activiteit_detail(inschrijving.activiteit)
    if student:
        profile = inschrijving.student.profile
        data["student"] = {
            "id": inschrijving.student_id,
            "naam": profile.naam,
            "email": inschrijving.student.email,
            "opleiding": profile.opleiding.naam if profile.opleiding_id else None,
        }
    return data
