import threading
import time
from datetime import UTC, datetime

from apscheduler.schedulers.background import BackgroundScheduler

REFRESH_JOB_ID = "refresh_liturgical_color"


def log_today_color(app):
    """Compute today's color and write it to the application log."""
    from .service import today_color_payload

    payload = today_color_payload()
    app.logger.info("Liturgical color for %s: %s (%s)", payload["date"], payload["color"], payload["hex"])
    return payload


def init_scheduler(app):
    scheduler = BackgroundScheduler()
    refresh_hour = int(app.config.get("SCHEDULER_COLOR_REFRESH_HOUR", 0))
    state_lock = threading.Lock()
    app.scheduler_state_lock = state_lock
    app.scheduler_state = {"updated_at": None, "jobs": {}}

    def _record_job_result(job_id, *, status, duration_ms, error=None):
        now = datetime.now(UTC).isoformat()
        with state_lock:
            jobs = app.scheduler_state.setdefault("jobs", {})
            entry = jobs.setdefault(job_id, {"consecutive_failures": 0})
            entry["last_status"] = status
            entry["last_run_at"] = now
            entry["last_duration_ms"] = round(duration_ms, 2)
            if status == "ok":
                entry["last_success_at"] = now
                entry["last_error"] = None
                entry["consecutive_failures"] = 0
            else:
                entry["last_error_at"] = now
                entry["last_error"] = (error or "unknown")[:500]
                entry["consecutive_failures"] = int(entry.get("consecutive_failures", 0)) + 1
            app.scheduler_state["updated_at"] = now

    def _run_job(job_id, fn):
        started = time.perf_counter()
        try:
            fn()
        except Exception as exc:
            # Never let a job crash the scheduler thread.
            app.logger.exception("Scheduler job %s crashed.", job_id)
            _record_job_result(
                job_id,
                status="error",
                duration_ms=(time.perf_counter() - started) * 1000,
                error=f"{type(exc).__name__}: {exc}",
            )
            return

        duration_ms = (time.perf_counter() - started) * 1000
        _record_job_result(job_id, status="ok", duration_ms=duration_ms)
        app.logger.info("Scheduler job %s completed in %.2f ms.", job_id, duration_ms)

    def refresh_color():
        with app.app_context():
            _run_job(REFRESH_JOB_ID, lambda: log_today_color(app))

    scheduler.add_job(
        func=refresh_color,
        trigger="cron",
        hour=refresh_hour,
        minute=0,
        id=REFRESH_JOB_ID,
        max_instances=1,
        coalesce=True,
    )
    scheduler.start()
    app.scheduler = scheduler
    return scheduler
