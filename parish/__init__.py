import logging
import os
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

from flask import Flask
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_login import LoginManager
from flask_migrate import Migrate, upgrade
from flask_wtf.csrf import CSRFProtect

from .config import config_by_name
from .models import db

login_manager = LoginManager()
login_manager.session_protection = "strong"

# In-memory storage; counters reset on process restart. Acceptable for
# single-worker deployments. For multi-worker setups use Redis storage.
limiter = Limiter(key_func=get_remote_address)
migrate = Migrate()
csrf = CSRFProtect()


def create_app(config_name=None):
    # Load .env so gunicorn (production) picks up env vars too
    from dotenv import load_dotenv

    load_dotenv(Path(__file__).resolve().parent.parent / ".env")

    if config_name is None:
        config_name = os.environ.get("FLASK_ENV", "development")

    app = Flask(__name__)
    config_cls = config_by_name.get(config_name, config_by_name["development"])
    app.config.from_object(config_cls)
    if hasattr(config_cls, "init_app"):
        config_cls.init_app(app)

    from werkzeug.middleware.proxy_fix import ProxyFix

    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

    _configure_logging(app)

    # Init extensions
    db.init_app(app)
    login_manager.init_app(app)
    limiter.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)

    from .errors import json_error, register_error_handlers
    from .models import User

    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(User, int(user_id))

    @login_manager.unauthorized_handler
    def unauthorized():
        return json_error(401, "Authentication required")

    # Register blueprints
    from .auth.routes import auth_bp
    from .calendar.routes import calendar_bp
    from .overrides.routes import overrides_bp
    from .saints.routes import saints_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(calendar_bp)
    app.register_blueprint(saints_bp)
    app.register_blueprint(overrides_bp)

    register_error_handlers(app)

    # Security headers
    @app.after_request
    def set_security_headers(response):
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        if not app.debug:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
            response.headers["Content-Security-Policy"] = "default-src 'none'; frame-ancestors 'none'"
        return response

    # Daily liturgical color refresh
    if app.config.get("SCHEDULER_ENABLED"):
        from .calendar.scheduler import init_scheduler

        init_scheduler(app)

    # Health check endpoints
    @app.route("/ping")
    def ping():
        return {
            "status": "ok",
            "timestamp": datetime.now(UTC).isoformat(),
        }, 200

    @app.route("/health")
    def health():
        result = {"timestamp": datetime.now(UTC).isoformat()}

        result["scheduler"], scheduler_ok = _scheduler_health(app)

        # Check database connectivity
        try:
            db.session.execute(db.text("SELECT 1"))
            result["database"] = {"status": "ok"}
        except Exception:
            app.logger.exception("Health check database probe failed.")
            result["database"] = {"status": "error", "error": "unavailable"}

        db_ok = result["database"]["status"] == "ok"
        all_ok = scheduler_ok and db_ok
        result["status"] = "ok" if all_ok else "degraded"
        return result, 200 if all_ok else 503

    # Apply pending Alembic migrations and seed admin on first run
    with app.app_context():
        upgrade()

        _seed_admin_if_needed(app)

        if app.config.get("SCHEDULER_ENABLED"):
            from .calendar.scheduler import log_today_color

            log_today_color(app)

    return app


def _configure_logging(app):
    """Set up file-based logging with rotation for production."""
    if app.debug or app.testing:
        return

    log_dir = Path(app.root_path).parent / "logs"
    log_dir.mkdir(exist_ok=True)

    file_handler = RotatingFileHandler(
        log_dir / "parish.log",
        maxBytes=5 * 1024 * 1024,  # 5 MB
        backupCount=5,
    )
    file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    file_handler.setLevel(logging.INFO)
    app.logger.addHandler(file_handler)
    app.logger.setLevel(logging.INFO)

    # The liturgical engine logs through module loggers
    engine_logger = logging.getLogger("parish.liturgical")
    engine_logger.addHandler(file_handler)
    engine_logger.setLevel(logging.INFO)


def _seed_admin_if_needed(app):
    import secrets

    from .models import User

    admin = User.query.filter_by(role="admin").first()
    if admin is not None:
        return

    admin_email = os.environ.get("ADMIN_EMAIL", "admin@parish.example.org").strip().lower()
    admin_password = os.environ.get("ADMIN_PASSWORD")
    generated = False
    if not admin_password:
        admin_password = secrets.token_urlsafe(16)
        generated = True
    admin = User(email=admin_email, display_name="Administrator", role="admin")
    admin.set_password(admin_password)
    db.session.add(admin)
    db.session.commit()
    app.logger.info("Default admin account created: %s", admin_email)
    if generated:
        app.logger.warning(
            "ADMIN_PASSWORD not set -- a random password was generated. Set ADMIN_PASSWORD env var before deploying."
        )
        pw_file = Path(app.instance_path) / ".admin_password"
        pw_file.parent.mkdir(parents=True, exist_ok=True)
        pw_file.write_text(f"Email:    {admin_email}\nPassword: {admin_password}\n")
        pw_file.chmod(0o600)
        app.logger.info("Generated admin credentials written to %s", pw_file)


def _scheduler_health(app):
    """Return ``(scheduler_report, ok)`` for the /health endpoint."""
    scheduler = getattr(app, "scheduler", None)
    if scheduler is None:
        return {"running": False, "reason": "disabled"}, True

    try:
        running = scheduler.running
        jobs = list(scheduler.get_jobs())
    except Exception:
        app.logger.exception("Health check scheduler probe failed.")
        return {"running": False, "reason": "probe_failed"}, False

    lock = getattr(app, "scheduler_state_lock", None)
    state = getattr(app, "scheduler_state", None) or {}
    if lock is not None:
        with lock:
            job_state = {job_id: dict(entry) for job_id, entry in state.get("jobs", {}).items()}
    else:
        job_state = state.get("jobs", {})

    max_failures = app.config.get("SCHEDULER_MAX_CONSECUTIVE_FAILURES", 3)
    report_jobs = []
    failing_jobs = []
    for job in jobs:
        entry = job_state.get(job.id, {})
        failures = int(entry.get("consecutive_failures", 0))
        report_jobs.append(
            {
                "id": job.id,
                "next_run": job.next_run_time.isoformat() if job.next_run_time else None,
                "last_status": entry.get("last_status"),
                "last_run_at": entry.get("last_run_at"),
                "consecutive_failures": failures,
            }
        )
        if failures >= max_failures:
            failing_jobs.append(job.id)

    report = {"running": running, "jobs": report_jobs, "failing_jobs": failing_jobs}
    return report, running and not failing_jobs
