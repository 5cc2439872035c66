"""
Gunicorn configuration for the git snapshots API.

Env vars that override defaults:
  PORT     — TCP port to bind (default: 8000)
  WORKERS  — number of worker processes (default: 2)
"""
import os

wsgi_app = "gitsnap.main:app"

bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# Requests are short read-only queries; two workers cover a single workspace host.
workers = int(os.environ.get("WORKERS", "2"))

# Each worker runs Uvicorn's ASGI event loop inside Gunicorn's process manager.
worker_class = "uvicorn.workers.UvicornWorker"

keepalive = 5
timeout = 60

# Access and error logs to stdout; application logs are JSON lines from gitsnap.core.logging.
loglevel = "info"
accesslog = "-"
errorlog = "-"
access_log_format = '%(h)s "%(r)s" %(s)s %(b)sB %(D)sµs'

graceful_timeout = 30
