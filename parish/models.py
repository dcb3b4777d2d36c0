import uuid
from datetime import UTC, datetime

import bcrypt
from flask_login import UserMixin
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import validates

from .liturgical.colors import COLOR_NAMES
from .liturgical.dates import as_date

db = SQLAlchemy()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # ON DELETE SET NULL on created_by relies on this under SQLite
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def _utcnow():
    return datetime.now(UTC)


def _uuid():
    return uuid.uuid4().hex


ROLES = ("admin", "viewer")


# ── User ────────────────────────────────────────────────────────────


class User(UserMixin, db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    public_id = db.Column(db.String(32), unique=True, nullable=False, default=_uuid)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    display_name = db.Column(db.String(255), nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(20), nullable=False, default="viewer")
    is_active_account = db.Column(db.Boolean, nullable=False, default=True)
    failed_login_count = db.Column(db.Integer, nullable=False, default=0)
    locked_until = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=_utcnow)
    last_login_at = db.Column(db.DateTime, nullable=True)

    __table_args__ = (
        db.CheckConstraint("role IN ({})".format(", ".join(f"'{role}'" for role in ROLES)), name="ck_users_role"),
    )

    def set_password(self, password):
        self.password_hash = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=12)).decode("utf-8")

    def check_password(self, password):
        return bcrypt.checkpw(password.encode("utf-8"), self.password_hash.encode("utf-8"))

    @property
    def is_admin(self):
        return self.role == "admin"

    @property
    def is_active(self):
        """Flask-Login uses this to check if user session is valid."""
        return self.is_active_account

    @property
    def is_locked(self):
        if self.locked_until is None:
            return False
        locked_until = self.locked_until
        if locked_until.tzinfo is None:
            locked_until = locked_until.replace(tzinfo=UTC)
        return locked_until > _utcnow()

    def to_summary(self):
        return {"id": self.public_id, "email": self.email, "display_name": self.display_name}

    def to_dict(self):
        return {
            **self.to_summary(),
            "role": self.role,
            "last_login_at": self.last_login_at.isoformat() if self.last_login_at else None,
        }

    def __repr__(self):
        return f"<User {self.email} ({self.role})>"


# ── Liturgical Color Override ──────────────────────────────────────


class LiturgicalColorOverride(db.Model):
    __tablename__ = "liturgical_color_overrides"

    id = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.Date, unique=True, nullable=False, index=True)
    color = db.Column(db.String(10), nullable=False)
    reason = db.Column(db.Text, nullable=False, default="")
    created_by = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=_utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=_utcnow, onupdate=_utcnow)

    creator = db.relationship("User", backref=db.backref("color_overrides", lazy="dynamic"))

    __table_args__ = (
        db.CheckConstraint(
            "color IN ({})".format(", ".join(f"'{name}'" for name in COLOR_NAMES)),
            name="ck_liturgical_color_overrides_color",
        ),
    )

    @validates("date")
    def _strip_time(self, key, value):
        return as_date(value)

    def to_dict(self):
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "color": self.color,
            "reason": self.reason or "",
            "created_by": self.creator.to_summary() if self.creator else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<LiturgicalColorOverride {self.date} {self.color}>"


# ── Audit Log ───────────────────────────────────────────────────────


class AuditLog(db.Model):
    __tablename__ = "audit_logs"

    id = db.Column(db.Integer, primary_key=True)
    timestamp = db.Column(db.DateTime, nullable=False, default=_utcnow, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    action = db.Column(db.String(100), nullable=False, index=True)
    target_type = db.Column(db.String(50), nullable=True)  # user, color_override
    target_id = db.Column(db.Integer, nullable=True)
    detail = db.Column(db.Text, nullable=True)
    ip_address = db.Column(db.String(45), nullable=True)

    user = db.relationship("User", backref="audit_logs", lazy="joined")

    def __repr__(self):
        return f"<AuditLog {self.action} at {self.timestamp}>"
