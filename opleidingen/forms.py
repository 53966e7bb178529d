# opleidingen/forms.py
"""
Forms for the opleidingen application.
"""

from django import forms
from .models import Opleiding

REQUIRED = "Naam en code zijn verplicht"


class OpleidingForm(forms.ModelForm):
    """
    Create or update a program.

    The uniqueness of ``code`` is checked by the model field and
    reported as "Deze code is al in gebruik".
    """

    class Meta:
        model = Opleiding
        fields = [
            "naam",
            "code",
            "beschrijving",
            "actief",
            "auto_goedkeuring_student_activiteiten",
        ]
        error_messages = {
            "naam": {"required": REQUIRED},
            "code": {"required": REQUIRED},
        }

    def clean_code(self):
        return self.cleaned_data["code"].strip().upper()
