# accounts/views_admin.py
"""
User management views for administrators.

Administrators create, update and delete accounts of every role.
An administrator cannot delete their own account.
"""

from django.contrib.auth.models import User
from django.http import JsonResponse

from monitoring.html_logger import info
from pxl_activiteiten.api import ApiView, get_or_404, parse_json, validated
from pxl_activiteiten.exceptions import ValidationFailed
from .forms import UserAccountForm
from .roles import ADMIN_ONLY, Role
from .serializers import user_detail, user_summary

USER_NOT_FOUND = "Gebruiker niet gevonden"


def _form_data(payload: dict, instance=None) -> dict:
    """
    Map a JSON payload onto :class:`UserAccountForm` fields.

    A missing ``actief`` keeps the current flag of an existing user
    and defaults to active for a new one.
    """
    actief = payload.get("actief")
    if actief is None:
        actief = instance.is_active if instance is not None else True
    return {
        "naam": payload.get("naam"),
        "email": payload.get("email"),
        "password": payload.get("password") or "",
        "role": payload.get("role"),
        "opleiding": payload.get("opleidingId"),
        "actief": actief,
    }


def _users():
    return User.objects.select_related("profile", "profile__opleiding")


class UserCollectionView(ApiView):
    """List users (optionally by ``?role=``) and create new ones."""

    allowed_roles = ADMIN_ONLY
    error_messages = {
        "get": "Er is een fout opgetreden bij het ophalen van de gebruikers",
        "post": "Er is een fout opgetreden bij het aanmaken van de gebruiker",
    }

    def get(self, request):
        users = _users().order_by("profile__naam")
        role = request.GET.get("role")
        if role:
            if role not in Role.values:
                raise ValidationFailed("Ongeldige rol")
            users = users.filter(profile__role=role)
        return JsonResponse({"users": [user_detail(u) for u in users]})

    def post(self, request):
        payload = parse_json(request)
        form = UserAccountForm(_form_data(payload))
        validated(form)
        user = form.save()
        info(f"Gebruiker {user.pk} aangemaakt door admin {self.caller.id}.")
        return JsonResponse({"success": True, "user": user_summary(user)})


class UserDetailView(ApiView):
    """Read, update or delete a single user."""

    allowed_roles = ADMIN_ONLY
    error_messages = {
        "get": "Er is een fout opgetreden bij het ophalen van de gebruiker",
        "patch": "Er is een fout opgetreden bij het bijwerken van de gebruiker",
        "delete": "Er is een fout opgetreden bij het verwijderen van de gebruiker",
    }

    def get(self, request, pk):
        user = get_or_404(_users(), USER_NOT_FOUND, pk=pk)
        return JsonResponse({"user": user_detail(user)})

    def patch(self, request, pk):
        payload = parse_json(request)
        user = get_or_404(_users(), USER_NOT_FOUND, pk=pk)
        form = UserAccountForm(_form_data(payload, user), instance=user)
        validated(form)
        user = form.save()
        info(f"Gebruiker {user.pk} bijgewerkt door admin {self.caller.id}.")
        return JsonResponse({"success": True, "user": user_detail(user)})

    def delete(self, request, pk):
        user = get_or_404(User, USER_NOT_FOUND, pk=pk)
        if user.pk == self.caller.id:
            raise ValidationFailed("Je kunt jezelf niet verwijderen")
        user.delete()
        info(f"Gebruiker {pk} verwijderd door admin {self.caller.id}.")
        return JsonResponse({"success": True, "message": "Gebruiker succesvol verwijderd"})
