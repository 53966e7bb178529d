# accounts/views.py
"""
Authentication views for the accounts application.

Users sign in with their email address and password; the session
cookie set by :func:`django.contrib.auth.login` identifies them on
subsequent calls.
"""

from django.contrib.auth import authenticate, login, logout
from django.contrib.auth.models import User
from django.http import JsonResponse
from django.middleware.csrf import get_token
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import ensure_csrf_cookie

from monitoring.html_logger import info, warn
from pxl_activiteiten.api import ApiView, parse_json
from pxl_activiteiten.exceptions import Unauthorized, ValidationFailed
from .models import UserProfile
from .roles import ALL_ROLES
from .serializers import user_detail


@method_decorator(ensure_csrf_cookie, name="dispatch")
class CsrfView(ApiView):
    """Hand out the CSRF cookie needed by the mutating endpoints."""

    def get(self, request):
        return JsonResponse({"success": True, "csrfToken": get_token(request)})


class LoginView(ApiView):
    """
    Open a session for an email/password pair.

    Inactive accounts are refused with the same message as wrong
    credentials.
    """

    error_message = "Er is een fout opgetreden bij het inloggen"

    def post(self, request):
        payload = parse_json(request)
        email = (payload.get("email") or "").strip()
        password = payload.get("password") or ""
        if not email or not password:
            raise ValidationFailed("Email en wachtwoord zijn verplicht")

        account = User.objects.filter(email__iexact=email).first()
        user = None
        if account is not None:
            user = authenticate(request, username=account.get_username(), password=password)
        if user is None or not UserProfile.objects.filter(user=user).exists():
            warn(f"Mislukte login voor {email}.")
            raise Unauthorized("Ongeldige inloggegevens")

        login(request, user)
        info(f"Login user={user.pk}.")
        return JsonResponse({"success": True, "user": user_detail(user)})


class LogoutView(ApiView):
    """End the current session."""

    allowed_roles = ALL_ROLES

    def post(self, request):
        logout(request)
        return JsonResponse({"success": True})


class MeView(ApiView):
    """Return the profile of the signed-in user."""

    allowed_roles = ALL_ROLES

    def get(self, request):
        return JsonResponse({"user": user_detail(self.caller.user)})
