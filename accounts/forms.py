"""Forms for user registration, login, and profile editing."""
from __future__ import annotations

from io import BytesIO

from django import forms
from django.contrib.auth import get_user_model
from django.contrib.auth.forms import UserCreationForm, AuthenticationForm
from django.contrib.auth.models import User
from django.core.exceptions import ValidationError
from django.core.files.base import ContentFile

from .models import UserProfile, Role

AVATAR_MAX_BYTES = 2 * 1024 * 1024
AVATAR_TYPES = ("image/jpeg", "image/png", "image/webp")


class RegistrationForm(UserCreationForm):
    """User registration form with a role selector.

    The role is written to the related `UserProfile` once, right after
    the `User` row is created. Nothing edits it afterwards.
    """

    name = forms.CharField(max_length=200, required=True, label="Full name")
    email = forms.EmailField(required=True)
    role = forms.ChoiceField(choices=Role.choices, initial=Role.STUDENT)

    class Meta:
        model = User
        fields = ("username", "name", "email", "role", "password1", "password2")

    def save(self, commit: bool = True) -> User:
        user = super().save(commit)
        if commit:
            profile, _ = UserProfile.objects.get_or_create(user=user)
            profile.role = self.cleaned_data.get("role") or Role.STUDENT
            profile.full_name = (self.cleaned_data.get("name") or "").strip()
            profile.save(update_fields=["role", "full_name"])
        return user

    def clean_email(self):
        email = (self.cleaned_data.get("email") or "").strip().lower()
        if not email:
            raise forms.ValidationError("E-mail is required.")
        if User.objects.filter(email__iexact=email).exists():
            raise forms.ValidationError("User already exists.")
        return email

    def clean_username(self):
        username = (self.cleaned_data.get("username") or "").strip()
        if User.objects.filter(username__iexact=username).exists():
            raise forms.ValidationError("This username is already taken.")
        return username


class EmailOrUsernameAuthenticationForm(AuthenticationForm):
    """Accept either the username or the e-mail address in the login box."""

    def __init__(self, request=None, *args, **kwargs):
        super().__init__(request, *args, **kwargs)
        self.fields["username"].label = "Username or e-mail"

    def clean(self):
        login = (self.cleaned_data.get("username") or "").strip()
        if "@" in login:
            user = get_user_model().objects.filter(email__iexact=login).first()
            if user:
                self.cleaned_data["username"] = user.get_username()
        return super().clean()


class ProfileForm(forms.ModelForm):
    """Edit display name, e-mail and avatar (the role is not editable)."""

    email = forms.EmailField(required=True)
    current_password = forms.CharField(
        required=True,
        widget=forms.PasswordInput,
        help_text="Confirm with your current password.",
    )

    class Meta:
        model = UserProfile
        fields = ("full_name", "avatar")

    def __init__(self, *args, **kwargs):
        self.user = kwargs.pop("user", None)
        super().__init__(*args, **kwargs)
        if self.user:
            self.fields["email"].initial = getattr(self.user, "email", "")

    def clean_avatar(self):
        f = self.cleaned_data.get("avatar")
        if not f or not hasattr(f, "content_type"):
            return f
        if getattr(f, "size", 0) > AVATAR_MAX_BYTES:
            raise ValidationError("Avatar must be 2 MB or smaller.")
        if f.content_type not in AVATAR_TYPES:
            raise ValidationError("Avatar must be JPEG, PNG, or WEBP.")
        return f

    def clean(self):
        cleaned = super().clean()
        if self.user:
            if not self.user.check_password(cleaned.get("current_password") or ""):
                self.add_error("current_password", "Current password is incorrect.")
            email = (cleaned.get("email") or "").strip().lower()
            if email and User.objects.filter(email__iexact=email).exclude(pk=self.user.pk).exists():
                self.add_error("email", "This e-mail is already in use.")
        return cleaned

    def save(self, commit: bool = True):
        profile: UserProfile = super().save(commit=False)
        if self.user:
            self.user.email = (self.cleaned_data.get("email") or "").strip().lower()
            if commit:
                self.user.save(update_fields=["email"])

        f = self.cleaned_data.get("avatar")
        if f and hasattr(f, "content_type"):
            # Normalise to a 256px PNG
            from PIL import Image

            try:
                img = Image.open(f)
                img = img.convert("RGBA") if img.mode not in ("RGB", "RGBA") else img
                img.thumbnail((256, 256))
                buf = BytesIO()
                img.save(buf, format="PNG", optimize=True)
            except (OSError, ValueError) as exc:
                raise ValidationError("Invalid image file.") from exc
            profile.avatar.save(f"avatar_{profile.user_id}.png", ContentFile(buf.getvalue()), save=False)
        if commit:
            profile.save()
        return profile
