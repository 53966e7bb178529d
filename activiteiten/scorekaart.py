# activiteiten/scorekaart.py
"""
Scorekaart: the hours a student earned in a school year.

An enrollment counts when the student effectively took part and
the proof of participation was approved. Hours are grouped by the
level (niveau 1 to 5) of the activity; activities without a level
count towards niveau 1.
"""

from datetime import date
from typing import Optional

from django.utils import timezone

from .models import Inschrijving
from .uren import schooljaar

NIVEAUS = (1, 2, 3, 4, 5)


def telbare_inschrijvingen(student, begin: date, einde: date):
    """Enrollments of ``student`` that earn hours between two dates."""
    return (
        Inschrijving.objects.select_related("activiteit")
        .filter(
            student=student,
            effectieve_deelname=True,
            bewijs_status=Inschrijving.BewijsStatus.GOEDGEKEURD,
            activiteit__datum__gte=begin,
            activiteit__datum__lte=einde,
        )
        .order_by("activiteit__datum", "activiteit__startuur")
    )


def bereken_scorekaart(student, today: Optional[date] = None) -> dict:
    """
    Build the scorekaart of a student for the current school year.

    Parameters
    ----------
    student : User
        The student.
    today : date, optional
        Reference date selecting the school year.

    Returns
    -------
    dict
        ``schooljaar`` label, ``urenPerNiveau`` (keys ``"1"``..``"5"``),
        ``totaal`` and the counted ``activiteiten``.
    """
    label, begin, einde = schooljaar(today or timezone.localdate())
    per_niveau = {niveau: 0.0 for niveau in NIVEAUS}
    activiteiten = []
    for inschrijving in telbare_inschrijvingen(student, begin, einde):
        activiteit = inschrijving.activiteit
        niveau = activiteit.niveau if activiteit.niveau in NIVEAUS else 1
        uren = activiteit.uren
        per_niveau[niveau] += uren
        activiteiten.append(
            {
                "inschrijvingId": inschrijving.pk,
                "activiteitId": activiteit.pk,
                "titel": activiteit.titel,
                "datum": activiteit.datum.isoformat(),
                "niveau": niveau,
                "uren": uren,
            }
        )
    return {
        "schooljaar": label,
        "urenPerNiveau": {str(n): round(u, 2) for n, u in per_niveau.items()},
        "totaal": round(sum(per_niveau.values()), 2),
        "activiteiten": activiteiten,
    }
