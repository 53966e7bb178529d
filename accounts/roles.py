# accounts/roles.py
"""
Roles of the portal and the role sets accepted per operation.

Admin rights are not derived from an inheritance chain: every
operation lists the roles it accepts, and "admin can do what a docent
can do" is expressed by putting both roles in the same set.
"""

from django.db import models


class Role(models.TextChoices):
    """
    Enumeration of user roles.

    STUDENT
        Enrolls in activities and submits proof of participation.
    DOCENT
        Creates activities and reviews requests and proofs.
    ADMIN
        Manages users, programs and the activity lifecycle.
    """

    STUDENT = "student", "Student"
    DOCENT = "docent", "Docent"
    ADMIN = "admin", "Administrator"


#: Operations reserved to administrators
ADMIN_ONLY = frozenset({Role.ADMIN.value})

#: Docent-facing operations, also open to administrators
DOCENT_OR_ADMIN = frozenset({Role.DOCENT.value, Role.ADMIN.value})

#: Student-facing operations, for students only
STUDENT_ONLY = frozenset({Role.STUDENT.value})

#: Any authenticated user
ALL_ROLES = frozenset(Role.values)
