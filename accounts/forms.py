# accounts/forms.py
"""
Forms for the accounts application.

This module defines the form used by administrators to create and
update user accounts. It is bound to JSON payloads by the views in
:mod:`accounts.views_admin`.
"""

from django import forms
from django.contrib.auth.models import User
from django.db import transaction
from django.db.models import Q

from opleidingen.models import Opleiding
from .models import UserProfile
from .roles import Role

#: Minimum length of a password replacing an existing one
MIN_PASSWORD_LENGTH = 8


class UserAccountForm(forms.Form):
    """
    Create or update a user together with its profile.

    The email address doubles as username. Students must be linked
    to a program; for every other role the program is cleared.

    Parameters
    ----------
    instance : User, optional
        The user being updated. Without it the form creates a user
        and the password becomes mandatory.
    """

    naam = forms.CharField(max_length=200)
    email = forms.EmailField(error_messages={"invalid": "Ongeldig email adres"})
    password = forms.CharField(required=False, strip=False)
    role = forms.ChoiceField(
        choices=Role.choices,
        error_messages={"invalid_choice": "Ongeldige rol"},
    )
    opleiding = forms.ModelChoiceField(
        queryset=Opleiding.objects.all(),
        required=False,
        error_messages={"invalid_choice": "Opleiding niet gevonden"},
    )
    actief = forms.BooleanField(required=False)

    def __init__(self, *args, instance=None, **kwargs):
        self.instance = instance
        super().__init__(*args, **kwargs)
        if instance is None:
            self.fields["password"].required = True
            required = "Alle velden zijn verplicht"
        else:
            required = "Naam, email en rol zijn verplicht"
        for name in ("naam", "email", "password", "role"):
            self.fields[name].error_messages["required"] = required

    def clean_email(self):
        email = self.cleaned_data["email"].strip().lower()
        taken = User.objects.filter(Q(email__iexact=email) | Q(username__iexact=email))
        if self.instance is not None:
            taken = taken.exclude(pk=self.instance.pk)
        if taken.exists():
            raise forms.ValidationError("Dit email adres is al in gebruik")
        return email

    def clean(self):
        cleaned = super().clean()
        if cleaned.get("role") == Role.STUDENT and not cleaned.get("opleiding"):
            self.add_error("opleiding", "Studenten moeten gekoppeld worden aan een opleiding")
        return cleaned

    @transaction.atomic
    def save(self) -> User:
        """
        Persist the user and its profile.

        On update the password is only replaced when the new one is
        at least ``MIN_PASSWORD_LENGTH`` characters long.

        Returns
        -------
        User
            The saved user.
        """
        data = self.cleaned_data
        user = self.instance or User()
        user.username = data["email"]
        user.email = data["email"]
        user.is_active = data["actief"]

        password = data["password"]
        if self.instance is None or len(password) >= MIN_PASSWORD_LENGTH:
            user.set_password(password)
        user.save()

        profile, _ = UserProfile.objects.get_or_create(user=user)
        profile.naam = data["naam"]
        profile.role = data["role"]
        profile.opleiding = data["opleiding"] if data["role"] == Role.STUDENT else None
        profile.save()
        return user
