"""Persisted liturgical color overrides.

The classifier only ever reads through :func:`find_override_for_date`;
writes go through the admin routes.
"""

from ..liturgical.dates import as_date
from ..models import LiturgicalColorOverride, db


def find_override_for_date(day):
    """Return the override recorded for *day*'s calendar date, or None."""
    return LiturgicalColorOverride.query.filter_by(date=as_date(day)).first()


def list_overrides(page=1, per_page=20):
    query = LiturgicalColorOverride.query.order_by(LiturgicalColorOverride.date.desc())
    return query.paginate(page=page, per_page=per_page, error_out=False)


def create_override(day, color, reason, created_by):
    override = LiturgicalColorOverride(date=day, color=color, reason=reason or "", created_by=created_by)
    db.session.add(override)
    db.session.commit()
    return override


def update_override(override, color, reason=None):
    override.color = color
    if reason is not None:
        override.reason = reason
    db.session.commit()
    return override


def delete_override(override):
    db.session.delete(override)
    db.session.commit()
