# bewijsstukken/forms.py
"""
Forms for the bewijsstukken application.

This module defines the upload form validating the proof file
against the configured content types and maximum size.
"""

from django import forms
from django.conf import settings

DEFAULT_CONTENT_TYPES = (
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
    "application/pdf",
)


class BewijsstukUploadForm(forms.Form):
    """
    Upload of a single proof file.

    The enrollment or activity the file belongs to is resolved by the
    view, since it depends on the caller.
    """

    file = forms.FileField(
        error_messages={
            "required": "Geen bestand geüpload",
            "empty": "Geen bestand geüpload",
        },
    )
    type = forms.CharField(max_length=50, required=False)

    def clean_file(self):
        bestand = self.cleaned_data["file"]
        allowed = getattr(settings, "BEWIJS_ALLOWED_CONTENT_TYPES", DEFAULT_CONTENT_TYPES)
        if bestand.content_type not in allowed:
            raise forms.ValidationError(
                "Ongeldig bestandstype. Toegestaan: JPG, PNG, GIF, WEBP, PDF"
            )
        max_size = getattr(settings, "BEWIJS_MAX_UPLOAD_SIZE", 10 * 1024 * 1024)
        if bestand.size > max_size:
            raise forms.ValidationError(
                f"Bestand is te groot. Maximum is {max_size // (1024 * 1024)}MB"
            )
        return bestand

    def clean_type(self):
        return self.cleaned_data.get("type") or "extra_bijlage"
