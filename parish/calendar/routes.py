from flask import Blueprint

from ..liturgical import get_liturgical_day, get_season, get_season_display_name, parse_calendar_date
from .service import color_for, color_payload, today_color_payload

calendar_bp = Blueprint("calendar", __name__, url_prefix="/api")


@calendar_bp.route("/liturgical-color")
def today_color():
    return today_color_payload()


@calendar_bp.route("/liturgical-color/<date_str>")
def color_for_date(date_str):
    return color_payload(parse_calendar_date(date_str))


@calendar_bp.route("/liturgical-day/<date_str>")
def liturgical_day(date_str):
    day = parse_calendar_date(date_str)
    season = get_season(day)
    return {
        "date": day.isoformat(),
        **get_liturgical_day(day).to_dict(),
        "color": color_for(day).name,
        "season": season,
        "season_name": get_season_display_name(season),
    }
