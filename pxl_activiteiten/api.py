# pxl_activiteiten/api.py
"""
Building blocks for the JSON handlers.

Every operation of the portal follows the same shape: authorize the
caller, fetch the target entity, check ownership, validate the payload,
persist, and answer with a small projection. :class:`ApiView` owns the
first and the last step (role check and error translation) so concrete
views only implement their HTTP methods.
"""

import json
import logging

from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import csrf_exempt, csrf_protect
from django.views.generic import View

from accounts.permissions import get_caller, require_role
from monitoring.html_logger import error
from .exceptions import ApiError, NotFound, ValidationFailed

logger = logging.getLogger(__name__)


def json_error(message: str, status: int) -> JsonResponse:
    """
    Build an error response.

    Parameters
    ----------
    message : str
        Message exposed to the caller.
    status : int
        HTTP status code.

    Returns
    -------
    JsonResponse
        ``{"error": message}`` with the given status.
    """
    return JsonResponse({"error": message}, status=status)


def csrf_failure(request, reason=""):
    """
    ``CSRF_FAILURE_VIEW`` of the project.

    Answers with the usual JSON error body instead of Django's HTML
    page. Only authorized callers get this far, see
    :meth:`ApiView.dispatch`.
    """
    return json_error("CSRF-verificatie mislukt", 403)


def parse_json(request) -> dict:
    """
    Decode the JSON object carried by the request body.

    An empty body is read as an empty object.

    Raises
    ------
    ValidationFailed
        If the body is not valid JSON or not a JSON object.
    """
    if not request.body:
        return {}
    try:
        payload = json.loads(request.body.decode("utf-8"))
    except (UnicodeDecodeError, ValueError):
        raise ValidationFailed("Ongeldige JSON")
    if not isinstance(payload, dict):
        raise ValidationFailed("Ongeldige JSON")
    return payload


def get_or_404(queryset, message: str, **lookup):
    """
    JSON counterpart of :func:`django.shortcuts.get_object_or_404`.

    Parameters
    ----------
    queryset : QuerySet or Model
        Where to look. Ownership conditions belong in the queryset or
        the lookup so that a filtered-out row reads as missing.
    message : str
        Message of the 404 response.

    Raises
    ------
    NotFound
        If no row matches.
    """
    if hasattr(queryset, "_default_manager"):
        queryset = queryset._default_manager.all()
    obj = queryset.filter(**lookup).first()
    if obj is None:
        raise NotFound(message)
    return obj


def parse_id(value, message: str) -> int:
    """
    Read a primary key sent as a JSON number or a numeric string.

    Raises
    ------
    ValidationFailed
        With ``message`` when the value is not a positive integer.
    """
    if isinstance(value, bool) or not str(value).isdecimal() or int(value) < 1:
        raise ValidationFailed(message)
    return int(value)


def validated(form) -> dict:
    """
    Return the cleaned data of a bound form.

    Raises
    ------
    ValidationFailed
        Carrying the first error message of the form.
    """
    if form.is_valid():
        return form.cleaned_data
    messages = [m for field_errors in form.errors.values() for m in field_errors]
    raise ValidationFailed(messages[0] if messages else None)


class ApiView(View):
    """
    Base class-based view for the JSON operations.

    Attributes
    ----------
    allowed_roles : frozenset or None
        Roles allowed to call the view. ``None`` makes the view public.
        The check runs before any handler code, so a denied request
        never reaches the database layer. It also runs before the CSRF
        check: an anonymous write answers 401, not 403.
    error_message : str
        Message of the 500 response returned when an unexpected
        exception escapes the handler.
    error_messages : dict
        Per HTTP method overrides of ``error_message``.
    caller : Caller or None
        Identity of the caller, resolved once per request.
    """

    allowed_roles = None
    error_message = "Er is een fout opgetreden"
    error_messages = {}

    def get_error_message(self, method: str) -> str:
        return self.error_messages.get(method.lower(), self.error_message)

    @method_decorator(csrf_exempt)
    def dispatch(self, request, *args, **kwargs):
        try:
            if self.allowed_roles is None:
                self.caller = get_caller(request)
            else:
                self.caller = require_role(request, self.allowed_roles)
            # The middleware skips exempt views; the token is checked here.
            return csrf_protect(super().dispatch)(request, *args, **kwargs)
        except ApiError as exc:
            return json_error(exc.message, exc.status)
        except Exception as exc:
            logger.exception("Unhandled error in %s", type(self).__name__)
            error(f"{type(self).__name__} {request.method} {request.path}: {exc!r}")
            return json_error(self.get_error_message(request.method), 500)
