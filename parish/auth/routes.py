from datetime import UTC, datetime, timedelta

import bcrypt
from flask import Blueprint, current_app, jsonify, session
from flask_login import current_user, login_required, login_user, logout_user
from flask_wtf.csrf import generate_csrf

from .. import limiter
from ..audit import log_event
from ..errors import json_error
from ..models import User, db
from .forms import LoginForm

auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")

_DUMMY_HASH = bcrypt.hashpw(b"dummy-password", bcrypt.gensalt(rounds=12))


@auth_bp.route("/csrf")
def csrf_token():
    return {"csrf_token": generate_csrf()}


# ── Login ──────────────────────────────────────────────────────────


@auth_bp.route("/login", methods=["POST"])
@limiter.limit("5 per minute")
def login():
    form = LoginForm()
    if not form.validate_on_submit():
        return json_error(400, "Invalid login request", form.errors)

    email = form.email.data.lower().strip()
    user = User.query.filter_by(email=email).first()

    if user and user.is_locked:
        bcrypt.checkpw(b"dummy-password", _DUMMY_HASH)
        log_event("login_locked", user)
        return json_error(403, "Account temporarily locked due to repeated failed login attempts")

    if user is None:
        # Equalize timing
        bcrypt.checkpw(form.password.data.encode("utf-8"), _DUMMY_HASH)
        log_event("login_failed", detail=f"email={email}")
        return json_error(401, "Invalid email or password")

    if not user.check_password(form.password.data):
        User.query.filter_by(id=user.id).update(
            {"failed_login_count": db.func.coalesce(User.failed_login_count, 0) + 1}
        )
        db.session.commit()
        db.session.refresh(user)

        max_failures = current_app.config.get("MAX_FAILED_LOGINS", 5)
        if user.failed_login_count >= max_failures:
            lockout_minutes = current_app.config.get("ACCOUNT_LOCKOUT_MINUTES", 15)
            user.locked_until = datetime.now(UTC) + timedelta(minutes=lockout_minutes)
            db.session.commit()
            log_event(
                "account_locked",
                user,
                detail=f"Locked for {lockout_minutes} minutes after {user.failed_login_count} failed attempts",
            )
        log_event("login_failed", detail=f"email={email}")
        return json_error(401, "Invalid email or password")

    if not user.is_active_account:
        log_event("login_inactive", user)
        return json_error(403, "Account is not active")

    user.failed_login_count = 0
    user.locked_until = None
    user.last_login_at = datetime.now(UTC)
    login_user(user)
    session["login_time"] = datetime.now(UTC).isoformat()
    db.session.commit()

    log_event("login_success", user, user_id=user.id)
    return {"user": user.to_dict()}


@auth_bp.route("/logout", methods=["POST"])
@login_required
@limiter.limit("10 per minute")
def logout():
    log_event("logout", current_user._get_current_object())
    logout_user()
    return {"message": "Logged out"}


@auth_bp.route("/me")
@login_required
def me():
    return jsonify(user=current_user.to_dict())
