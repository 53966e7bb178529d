# accounts/signals.py
"""
Signals for the accounts application.

This module ensures that each user has an associated
UserProfile instance. It creates a profile upon user creation
and backfills missing profiles after database migrations.
"""

from django.apps import apps
from django.contrib.auth import get_user_model
from django.db.models.signals import post_migrate, post_save
from django.db.utils import OperationalError, ProgrammingError
from django.dispatch import receiver

from .models import UserProfile
from .roles import Role

User = get_user_model()


def _profile_defaults(user) -> dict:
    """
    Return the initial profile values for a user.

    Superusers become administrators; everybody else starts as a
    student until an administrator changes the role.
    """
    return {
        "naam": user.get_full_name() or user.get_username(),
        "role": Role.ADMIN if user.is_superuser else Role.STUDENT,
    }


@receiver(post_save, sender=User)
def create_profile_on_user_create(sender, instance, created, **kwargs):
    """
    Create a UserProfile when a new user is created.

    Parameters
    ----------
    sender : Model
        The model class sending the signal (User).
    instance : User
        The user instance that was created or updated.
    created : bool
        True if a new user instance was created.
    **kwargs : dict
        Additional keyword arguments provided by the signal.
    """
    if not created:
        return
    try:
        UserProfile.objects.get_or_create(user=instance, defaults=_profile_defaults(instance))
    except (OperationalError, ProgrammingError):
        # The profile table may not exist yet while migrating
        pass


@receiver(post_migrate)
def backfill_profiles(sender, **kwargs):
    """
    Ensure all existing users have associated UserProfile records.

    Executed after migrations are applied; creates profiles for
    users without one.
    """
    try:
        if not apps.is_installed("accounts"):
            return

        existing = set(UserProfile.objects.values_list("user_id", flat=True))
        to_create = [
            UserProfile(user=u, **_profile_defaults(u))
            for u in User.objects.all()
            if u.id not in existing
        ]
        if to_create:
            UserProfile.objects.bulk_create(to_create, ignore_conflicts=True)
    except (OperationalError, ProgrammingError):
        # Tables are not ready during early migration states
        pass
