# accounts/serializers.py
"""
JSON projections of users.

Only non-sensitive fields are exposed; password hashes and session
data never leave the server.
"""


def user_summary(user) -> dict:
    """
    Project a user for lists.

    Returns
    -------
    dict
        ``id``, ``naam``, ``email``, ``role`` and ``actief``.
    """
    profile = user.profile
    return {
        "id": user.pk,
        "naam": profile.naam,
        "email": user.email,
        "role": profile.role,
        "actief": user.is_active,
    }


def user_detail(user) -> dict:
    """Project a user together with its home program."""
    data = user_summary(user)
    opleiding = user.profile.opleiding
    data["opleidingId"] = opleiding.pk if opleiding else None
    data["opleidingNaam"] = opleiding.naam if opleiding else None
    return data
