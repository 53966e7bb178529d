# opleidingen/scope.py
"""
Program scope of a docent.

Docent-facing lists and counts only show entities belonging to the
programs the docent is linked to. A docent without any link is not
restricted at all: the empty association list is a sentinel for
"every program", not for "no program".

Reviews are writes and use :func:`resolve_review_scope` instead. There
the empty list closes the scope for docenten, and only admins reach
every program.
"""

from dataclasses import dataclass, field
from typing import Optional

from django.db.models import Q

from accounts.roles import Role

from .models import DocentOpleiding


@dataclass(frozen=True)
class ProgramScope:
    """
    Set of program ids a docent's queries are restricted to.

    Attributes
    ----------
    opleiding_ids : frozenset
        Linked program ids. Empty means unrestricted unless ``closed``.
    closed : bool
        Matches no program at all.
    """

    opleiding_ids: frozenset = field(default_factory=frozenset)
    closed: bool = False

    @property
    def unrestricted(self) -> bool:
        return not self.closed and not self.opleiding_ids

    def filter(self, lookup: str) -> Q:
        """
        Build the queryset condition for this scope.

        Parameters
        ----------
        lookup : str
            Path from the queried model to the program foreign key,
            e.g. ``"opleiding"`` or ``"student__profile__opleiding"``.

        Returns
        -------
        Q
            An empty ``Q()`` for an unrestricted scope, otherwise an
            ``__in`` condition on the linked ids (none for a closed
            scope).
        """
        if self.unrestricted:
            return Q()
        return Q(**{f"{lookup}__in": sorted(self.opleiding_ids)})

    def allows(self, opleiding_id: Optional[int]) -> bool:
        """Return whether a single program id falls inside the scope."""
        return self.unrestricted or opleiding_id in self.opleiding_ids


def resolve_program_scope(docent) -> ProgramScope:
    """
    Compute the program scope of a docent.

    The associations are read on every call; nothing is cached
    between requests.

    Parameters
    ----------
    docent : User
        The docent (or admin) whose links are looked up.

    Returns
    -------
    ProgramScope
        Restricted to the linked programs, or unrestricted when the
        docent has no link.
    """
    ids = DocentOpleiding.objects.filter(docent=docent).values_list("opleiding_id", flat=True)
    return ProgramScope(frozenset(ids))


def resolve_review_scope(caller) -> ProgramScope:
    """
    Compute the scope in which a caller may review student work.

    Parameters
    ----------
    caller : Caller
        The reviewing docent or admin.

    Returns
    -------
    ProgramScope
        Unrestricted for admins. For a docent, the linked programs, or
        a closed scope when the docent has no link.
    """
    if caller.role == Role.ADMIN:
        return ProgramScope()
    scope = resolve_program_scope(caller.user)
    if scope.unrestricted:
        return ProgramScope(closed=True)
    return scope
