# pxl_activiteiten/exceptions.py
"""
Exceptions shared by the JSON handlers of the project.

Every handler is the outermost recovery boundary of its request.
Domain code raises one of the :class:`ApiError` subclasses below and
:class:`pxl_activiteiten.api.ApiView` turns it into an
``{"error": message}`` response carrying the matching status code.
"""


class ApiError(Exception):
    """
    Base class for errors that map onto an HTTP error response.

    Attributes
    ----------
    status : int
        HTTP status code of the response.
    message : str
        Message returned to the caller in the ``error`` key.
    """

    status = 500
    default_message = "Er is een fout opgetreden"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(ApiError):
    """
    Raised when the caller has no valid session or the wrong role.

    Both cases are reported with the same generic message so the
    caller cannot tell them apart.
    """

    status = 401
    default_message = "Unauthorized"


class NotFound(ApiError):
    """
    Raised when the target entity does not exist or is filtered out
    by an ownership or scope condition.
    """

    status = 404
    default_message = "Niet gevonden"


class ValidationFailed(ApiError):
    """Raised when the payload is malformed or holds an invalid value."""

    status = 400
    default_message = "Ongeldige gegevens"
