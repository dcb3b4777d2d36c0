from flask import Blueprint, abort, current_app, request
from flask_login import current_user
from sqlalchemy.exc import IntegrityError

from ..audit import log_event
from ..auth.decorators import admin_required
from ..errors import json_error
from ..liturgical import parse_calendar_date
from ..models import db
from .forms import OverrideForm, OverrideUpdateForm
from .store import create_override, delete_override, find_override_for_date, list_overrides, update_override

overrides_bp = Blueprint("overrides", __name__, url_prefix="/api/liturgical-color-overrides")


def _require_json_object():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        abort(400, description="Request body must be a JSON object")
    return payload


def _get_override_or_404(date_str):
    day = parse_calendar_date(date_str)
    override = find_override_for_date(day)
    if override is None:
        abort(404, description=f"No color override for {day.isoformat()}")
    return override


@overrides_bp.route("", methods=["GET"])
@admin_required
def list_color_overrides():
    page = max(1, request.args.get("page", 1, type=int))
    limit = request.args.get("limit", current_app.config["OVERRIDES_PAGE_SIZE"], type=int)
    limit = min(max(1, limit), current_app.config["OVERRIDES_MAX_PAGE_SIZE"])

    pagination = list_overrides(page=page, per_page=limit)
    return {
        "overrides": [override.to_dict() for override in pagination.items],
        "pagination": {
            "page": page,
            "limit": limit,
            "total": pagination.total,
            "pages": pagination.pages,
        },
    }


@overrides_bp.route("/<date_str>", methods=["GET"])
@admin_required
def get_color_override(date_str):
    return _get_override_or_404(date_str).to_dict()


@overrides_bp.route("", methods=["POST"])
@admin_required
def create_color_override():
    _require_json_object()
    form = OverrideForm()
    if not form.validate_on_submit():
        return json_error(400, "Invalid color override", form.errors)

    day = form.date.parsed
    if find_override_for_date(day) is not None:
        abort(409, description=f"A color override already exists for {day.isoformat()}")

    try:
        override = create_override(day, form.color.data, form.reason.data, current_user.id)
    except IntegrityError:
        db.session.rollback()
        abort(409, description=f"A color override already exists for {day.isoformat()}")

    log_event("color_override_created", override, detail=f"{override.date.isoformat()} -> {override.color}")
    current_app.logger.info("Color override for %s set to %s by %s", day, override.color, current_user.email)
    return override.to_dict(), 201


@overrides_bp.route("/<date_str>", methods=["PUT"])
@admin_required
def update_color_override(date_str):
    override = _get_override_or_404(date_str)
    payload = _require_json_object()
    form = OverrideUpdateForm()
    if not form.validate_on_submit():
        return json_error(400, "Invalid color override", form.errors)

    previous = override.color
    reason = (form.reason.data or "") if "reason" in payload else None
    update_override(override, form.color.data, reason)
    log_event("color_override_updated", override, detail=f"{previous} -> {override.color}")
    return override.to_dict()


@overrides_bp.route("/<date_str>", methods=["DELETE"])
@admin_required
def delete_color_override(date_str):
    override = _get_override_or_404(date_str)
    day = override.date.isoformat()
    detail = f"{day} ({override.color})"
    log_event("color_override_deleted", override, detail=detail, commit=False)
    delete_override(override)
    return {"message": f"Color override for {day} deleted"}
