# activiteiten/forms.py
"""
Forms for the activiteiten application.

The forms are bound to JSON payloads: :func:`activiteit_form_data`
translates the camelCase keys of the client into form field names.
"""

from django import forms

from opleidingen.models import Opleiding
from .models import Activiteit

#: JSON key -> form field
PAYLOAD_FIELDS = {
    "titel": "titel",
    "typeActiviteit": "type_activiteit",
    "aard": "aard",
    "omschrijving": "omschrijving",
    "datum": "datum",
    "startuur": "startuur",
    "einduur": "einduur",
    "locatie": "locatie",
    "weblink": "weblink",
    "organisatorPxl": "organisator_pxl",
    "organisatorExtern": "organisator_extern",
    "bewijslink": "bewijslink",
    "verplichtProfiel": "verplicht_profiel",
    "maxPlaatsen": "max_plaatsen",
    "niveau": "niveau",
    "opleidingId": "opleiding",
}


def activiteit_form_data(payload: dict, instance=None, keys=PAYLOAD_FIELDS) -> dict:
    """
    Map a JSON payload onto :class:`ActiviteitForm` fields.

    Keys absent from the payload keep the value of ``instance`` so
    that a PATCH may carry only the fields it changes. Timestamps
    sent for ``datum`` are cut to their date part, and an empty or
    zero ``maxPlaatsen`` means "no limit".
    """
    data = {}
    for key, field in keys.items():
        if key in payload:
            value = payload[key]
        elif instance is not None:
            value = getattr(instance, f"{field}_id" if field == "opleiding" else field)
        else:
            value = None
        data[field] = "" if value is None else value

    if isinstance(data.get("datum"), str):
        data["datum"] = data["datum"][:10]
    if "max_plaatsen" in data and not data["max_plaatsen"]:
        data["max_plaatsen"] = ""
    return data


class ActiviteitForm(forms.ModelForm):
    """
    Create or update an activity.

    Status, request type and owner are set by the views; the form
    only covers the descriptive fields.
    """

    required_message = "Titel, type, datum en tijd zijn verplicht"

    opleiding = forms.ModelChoiceField(
        queryset=Opleiding.objects.all(),
        required=False,
        error_messages={"invalid_choice": "Opleiding niet gevonden"},
    )

    class Meta:
        model = Activiteit
        fields = [
            "titel",
            "type_activiteit",
            "datum",
            "startuur",
            "einduur",
            "aard",
            "omschrijving",
            "locatie",
            "weblink",
            "organisator_pxl",
            "organisator_extern",
            "bewijslink",
            "verplicht_profiel",
            "max_plaatsen",
            "niveau",
            "opleiding",
        ]
        error_messages = {
            "datum": {"invalid": "Ongeldige datum"},
            "startuur": {"invalid": "Ongeldig startuur"},
            "einduur": {"invalid": "Ongeldig einduur"},
            "max_plaatsen": {"invalid": "Ongeldig aantal plaatsen"},
            "niveau": {
                "invalid": "Niveau moet tussen 1 en 5 liggen",
                "min_value": "Niveau moet tussen 1 en 5 liggen",
                "max_value": "Niveau moet tussen 1 en 5 liggen",
            },
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for name in ("titel", "type_activiteit", "datum", "startuur", "einduur"):
            self.fields[name].error_messages["required"] = self.required_message

    def clean(self):
        cleaned = super().clean()
        startuur, einduur = cleaned.get("startuur"), cleaned.get("einduur")
        if startuur and einduur and einduur <= startuur:
            self.add_error("einduur", "Het einduur moet na het startuur liggen")
        return cleaned


#: Fields a student fills in when requesting an activity
AANVRAAG_FIELDS = {
    key: field
    for key, field in PAYLOAD_FIELDS.items()
    if field not in {"max_plaatsen", "niveau", "opleiding", "verplicht_profiel"}
}


class AanvraagForm(ActiviteitForm):
    """
    Activity request submitted by a student.

    The program is taken from the student's profile, not from the
    payload.
    """

    required_message = "Titel, type, datum, startuur en einduur zijn verplicht"
    opleiding = None

    class Meta(ActiviteitForm.Meta):
        fields = list(AANVRAAG_FIELDS.values())
