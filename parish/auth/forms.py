from flask_wtf import FlaskForm
from wtforms import PasswordField, StringField
from wtforms.validators import DataRequired, Email, Length, StopValidation


def _require_text(form, field):
    if field.data is not None and not isinstance(field.data, str):
        raise StopValidation("Must be a string.")


class LoginForm(FlaskForm):
    email = StringField("Email", validators=[_require_text, DataRequired(), Email(), Length(max=255)])
    password = PasswordField("Password", validators=[_require_text, DataRequired(), Length(max=128)])
