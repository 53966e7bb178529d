# bewijsstukken/serializers.py
"""
JSON projections of proof files and of enrollments under review.
"""

from activiteiten.serializers import inschrijving_data


def bewijsstuk_data(bewijsstuk) -> dict:
    return {
        "id": bewijsstuk.pk,
        "inschrijvingId": bewijsstuk.inschrijving_id,
        "type": bewijsstuk.type,
        "bestandsnaam": bewijsstuk.bestandsnaam,
        "bestandspad": bewijsstuk.bestand.url if bewijsstuk.bestand else None,
        "uploadedAt": bewijsstuk.uploaded_at.isoformat() if bewijsstuk.uploaded_at else None,
    }


def inschrijving_met_bewijzen(inschrijving, student=False) -> dict:
    """
    Enrollment with its activity and every uploaded proof, newest first.

    Parameters
    ----------
    inschrijving : Inschrijving
        The enrollment; ``bewijsstukken`` may be prefetched.
    student : bool
        Embed the student as well, for the docent review lists.
    """
    data = inschrijving_data(inschrijving, activiteit=True, student=student)
    data["bewijsstukken"] = [bewijsstuk_data(b) for b in inschrijving.bewijsstukken.all()]
    return data
