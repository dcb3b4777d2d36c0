from flask import Blueprint, abort, current_app, request

from ..liturgical import get_feasts_in_range, get_saint_of_the_day, get_upcoming_feasts, parse_calendar_date
from ..liturgical.dates import days_between

saints_bp = Blueprint("saints", __name__, url_prefix="/api/saints")


def _requested_days():
    default = current_app.config["UPCOMING_FEASTS_DEFAULT_DAYS"]
    days = request.args.get("days", default, type=int)
    return min(max(1, days), current_app.config["UPCOMING_FEASTS_MAX_DAYS"])


@saints_bp.route("")
def saints_overview():
    upcoming = get_upcoming_feasts(_requested_days())
    return {"today": get_saint_of_the_day(), "upcoming": upcoming, "count": len(upcoming)}


@saints_bp.route("/today")
def saints_today():
    return get_saint_of_the_day()


@saints_bp.route("/upcoming")
def saints_upcoming():
    feasts = get_upcoming_feasts(_requested_days())
    return {"feasts": feasts, "count": len(feasts)}


@saints_bp.route("/range")
def saints_in_range():
    start_arg = request.args.get("start")
    end_arg = request.args.get("end")
    if not start_arg or not end_arg:
        abort(400, description="Both start and end dates are required")

    start = parse_calendar_date(start_arg)
    end = parse_calendar_date(end_arg)
    max_days = current_app.config["MAX_FEAST_RANGE_DAYS"]
    if days_between(start, end) + 1 > max_days:
        abort(400, description=f"Date range cannot exceed {max_days} days")

    feasts = get_feasts_in_range(start, end)
    return {"feasts": feasts, "count": len(feasts)}
