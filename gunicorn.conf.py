# Gunicorn configuration for the parish calendar service
#
# The color refresh job and the rate limiter are process-local, so this
# application MUST run with a single worker.
import os

workers = 1
bind = os.environ.get("GUNICORN_BIND", "0.0.0.0:8080")
timeout = int(os.environ.get("GUNICORN_TIMEOUT_SECONDS", "30"))
graceful_timeout = int(os.environ.get("GUNICORN_GRACEFUL_TIMEOUT_SECONDS", "30"))


def post_fork(server, worker):
    server.log.info("Worker spawned (pid: %s). Single-worker mode active.", worker.pid)
