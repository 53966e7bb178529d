# activiteiten/uren.py
"""
Hour and school year arithmetic used by the scorekaart.
"""

from datetime import date, time
from typing import Tuple


def bereken_uren(startuur: time, einduur: time) -> float:
    """
    Return the duration between two times of day in hours.

    Parameters
    ----------
    startuur, einduur : datetime.time
        Start and end of the activity on the same day.

    Returns
    -------
    float
        Hours rounded to two decimals, e.g. 09:00-12:30 gives 3.5.
    """
    start = startuur.hour * 60 + startuur.minute
    eind = einduur.hour * 60 + einduur.minute
    return round((eind - start) / 60, 2)


def schooljaar(dag: date) -> Tuple[str, date, date]:
    """
    Return the school year a date belongs to.

    A school year starts on 1 September.

    Returns
    -------
    tuple
        Label ``"YYYY-YYYY"``, first day and last day of the year.
    """
    begin = dag.year if dag.month >= 9 else dag.year - 1
    return f"{begin}-{begin + 1}", date(begin, 9, 1), date(begin + 1, 8, 31)
