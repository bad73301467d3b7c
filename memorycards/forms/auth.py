from wtforms import StringField, EmailField, PasswordField, SubmitField

from memorycards.forms.base import ValidatedForm
from memorycards.utils.validator import EMAIL_RX, not_blank, max_chars, min_chars, matches

BLANK = "This field cannot be blank"
BAD_EMAIL = "This field must be a valid email address"

MIN_PASSWORD_LENGTH = 8
MAX_FIELD_LENGTH = 255  # users.name and users.email are String(255)
TOO_LONG = f"This field cannot be more than {MAX_FIELD_LENGTH} characters long"


class SignupForm(ValidatedForm):
    name = StringField("Name", render_kw={"autocomplete": "name"})
    email = EmailField("Email Address", render_kw={"autocomplete": "email"})
    password = PasswordField("Password", render_kw={"autocomplete": "new-password"})
    submit = SubmitField("Sign Up")

    def check(self) -> None:
        v = self.validator
        v.check_field(not_blank(self.name.data), "name", BLANK)
        v.check_field(max_chars(self.name.data, MAX_FIELD_LENGTH), "name", TOO_LONG)
        v.check_field(not_blank(self.email.data), "email", BLANK)
        v.check_field(matches(self.email.data, EMAIL_RX), "email", BAD_EMAIL)
        v.check_field(max_chars(self.email.data, MAX_FIELD_LENGTH), "email", TOO_LONG)
        v.check_field(not_blank(self.password.data), "password", BLANK)
        v.check_field(min_chars(self.password.data, MIN_PASSWORD_LENGTH), "password",
                      f"This field must be at least {MIN_PASSWORD_LENGTH} characters long")


class LoginForm(ValidatedForm):
    email = EmailField("Email Address", render_kw={"autocomplete": "email"})
    password = PasswordField("Password", render_kw={"autocomplete": "current-password"})
    submit = SubmitField("Log In")

    def check(self) -> None:
        v = self.validator
        v.check_field(not_blank(self.email.data), "email", BLANK)
        v.check_field(matches(self.email.data, EMAIL_RX), "email", BAD_EMAIL)
        v.check_field(max_chars(self.email.data, MAX_FIELD_LENGTH), "email", TOO_LONG)
        v.check_field(not_blank(self.password.data), "password", BLANK)
