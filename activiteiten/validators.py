# activiteiten/validators.py
"""
Status validation for activities.

A requested status is accepted when it is a non-empty member of the
status set of the operation. The order in which statuses follow each
other is not checked: ``afgerond`` may go back to ``concept``.
"""

from pxl_activiteiten.exceptions import ValidationFailed
from .models import Activiteit

#: Every status an activity may hold
ACTIVITEIT_STATUSSEN = frozenset(Activiteit.Status.values)

#: Outcomes of a docent review of a student request
REVIEW_STATUSSEN = frozenset({Activiteit.Status.GOEDGEKEURD.value, Activiteit.Status.AFGEKEURD.value})


def validate_status(candidate, domain=ACTIVITEIT_STATUSSEN) -> str:
    """
    Check a requested status against a status set.

    Parameters
    ----------
    candidate : object
        Value read from the request payload.
    domain : frozenset
        Accepted status values.

    Returns
    -------
    str
        The candidate, unchanged.

    Raises
    ------
    ValidationFailed
        "Ongeldige status" when the candidate is missing, not a
        string or not part of ``domain``.
    """
    if isinstance(candidate, str) and candidate and candidate in domain:
        return candidate
    raise ValidationFailed("Ongeldige status")
