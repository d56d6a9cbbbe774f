from __future__ import annotations

import re
from django.core.exceptions import ValidationError
from django.utils.translation import gettext as _


class PasswordComplexityValidator:
    """Require letters and digits in every password.

    Length is handled by Django's `MinimumLengthValidator`; this adds
    the character-class rule applied at registration.
    """

    letter = re.compile(r"[A-Za-z]")
    digit = re.compile(r"\d")

    def validate(self, password: str, user=None):  # noqa: D401
        if not self.letter.search(password):
            raise ValidationError(_("Password must contain a letter."), code="password_no_letter")
        if not self.digit.search(password):
            raise ValidationError(_("Password must contain a digit."), code="password_no_digit")

    def get_help_text(self):  # noqa: D401
        return _("Password must include at least one letter and one digit.")
