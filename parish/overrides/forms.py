from flask_wtf import FlaskForm
from wtforms import SelectField, StringField, TextAreaField
from wtforms.validators import DataRequired, Length, Optional, StopValidation, ValidationError

from ..liturgical import COLOR_NAMES, InvalidDateError, parse_calendar_date


def _lower(value):
    return value.strip().lower() if isinstance(value, str) else value


def _strip(value):
    return value.strip() if isinstance(value, str) else value


def _require_text(form, field):
    if field.data is not None and not isinstance(field.data, str):
        raise StopValidation("Must be a string.")


def _validate_calendar_date(form, field):
    try:
        field.parsed = parse_calendar_date(field.data)
    except InvalidDateError as exc:
        raise ValidationError(str(exc)) from exc


class OverrideUpdateForm(FlaskForm):
    color = SelectField(
        "Color",
        choices=[(name, name.title()) for name in COLOR_NAMES],
        filters=[_lower],
        validators=[DataRequired()],
        validate_choice=True,
    )
    reason = TextAreaField("Reason", filters=[_strip], validators=[Optional(), _require_text, Length(max=500)])


class OverrideForm(OverrideUpdateForm):
    date = StringField("Date", validators=[DataRequired(), _validate_calendar_date])
