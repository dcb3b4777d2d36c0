from flask import has_request_context, request
from flask_login import current_user

from ..models import AuditLog, LiturgicalColorOverride, User, db

_TARGET_TYPES = {
    User: "user",
    LiturgicalColorOverride: "color_override",
}


def _request_user_id():
    if not has_request_context():
        return None
    if current_user and current_user.is_authenticated:
        return current_user.id
    return None


def log_event(action, target=None, detail=None, user_id=None, commit=None):
    """Record an audit event about *target* (a model instance or None).

    If the session already has pending writes, the entry joins that
    transaction instead of being committed on its own.
    """
    has_pending_writes = bool(db.session.new or db.session.dirty or db.session.deleted)
    entry = AuditLog(
        user_id=user_id or _request_user_id(),
        action=action,
        target_type=_TARGET_TYPES.get(type(target)) if target is not None else None,
        target_id=getattr(target, "id", None),
        detail=detail,
        ip_address=request.remote_addr if has_request_context() else None,
    )
    db.session.add(entry)

    should_commit = (not has_pending_writes) if commit is None else commit
    if should_commit:
        db.session.commit()
    else:
        db.session.flush()

    return entry
