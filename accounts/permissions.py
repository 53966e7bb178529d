# accounts/permissions.py
"""
Authorization guard of the portal.

The caller is resolved once per request from the session and handed
to the handlers as an explicit :class:`Caller` value. Whether the
caller may run an operation is a pure predicate over that value and
the role set of the operation.
"""

from dataclasses import dataclass
from typing import Optional

from pxl_activiteiten.exceptions import Unauthorized
from .models import UserProfile


@dataclass(frozen=True)
class Caller:
    """
    Identity of the user behind a request.

    Attributes
    ----------
    user : User
        The authenticated Django user.
    role : str
        Role value taken from the profile.
    opleiding_id : int or None
        Home program of a student.
    """

    user: object
    role: str
    opleiding_id: Optional[int] = None

    @property
    def id(self) -> int:
        return self.user.pk


def get_caller(request) -> Optional[Caller]:
    """
    Resolve the caller of a request.

    Returns
    -------
    Caller or None
        ``None`` when the session is anonymous, the account is
        inactive or the user has no profile.
    """
    user = getattr(request, "user", None)
    if user is None or not user.is_authenticated or not user.is_active:
        return None
    try:
        profile = user.profile
    except UserProfile.DoesNotExist:
        return None
    return Caller(user=user, role=profile.role, opleiding_id=profile.opleiding_id)


def authorize(caller: Optional[Caller], required_roles) -> bool:
    """
    Decide whether a caller may run an operation.

    Parameters
    ----------
    caller : Caller or None
        Resolved caller; ``None`` stands for "not authenticated".
    required_roles : frozenset
        Roles accepted by the operation.

    Returns
    -------
    bool
        True iff the caller is authenticated and its role belongs
        to ``required_roles``.
    """
    return caller is not None and caller.role in required_roles


def require_role(request, required_roles) -> Caller:
    """
    Resolve the caller and enforce the role set of an operation.

    Raises
    ------
    Unauthorized
        If :func:`authorize` denies the caller.
    """
    caller = get_caller(request)
    if not authorize(caller, required_roles):
        raise Unauthorized()
    return caller
