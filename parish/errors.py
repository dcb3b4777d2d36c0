from flask import jsonify, request

from .liturgical import InvalidDateError, InvalidDateRangeError


def json_error(status, message, errors=None):
    body = {"message": message}
    if errors:
        body["errors"] = errors
    return jsonify(body), status


def register_error_handlers(app):
    @app.errorhandler(InvalidDateError)
    @app.errorhandler(InvalidDateRangeError)
    def invalid_date(e):
        return json_error(400, str(e))

    @app.errorhandler(400)
    def bad_request(e):
        return json_error(400, e.description or "Bad request")

    @app.errorhandler(401)
    def unauthorized(e):
        return json_error(401, "Authentication required")

    @app.errorhandler(403)
    def forbidden(e):
        app.logger.warning("403 Forbidden: %s", request.path)
        return json_error(403, "Admin privileges required")

    @app.errorhandler(404)
    def not_found(e):
        return json_error(404, e.description or "Not found")

    @app.errorhandler(405)
    def method_not_allowed(e):
        return json_error(405, "Method not allowed")

    @app.errorhandler(409)
    def conflict(e):
        return json_error(409, e.description or "Conflict")

    @app.errorhandler(429)
    def too_many_requests(e):
        return json_error(429, "Too many requests, please try again later")

    @app.errorhandler(500)
    def internal_error(e):
        app.logger.exception("Internal server error: %s", e)
        return json_error(500, "Internal server error")
