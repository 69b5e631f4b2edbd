"""
Gunicorn configuration for the Finance Tracker API.

Every value can be overridden through the environment, e.g.
GUNICORN_WORKERS=4 GUNICORN_BIND=127.0.0.1:8080 python run.py --production
"""
import os

# Server socket
bind = os.getenv("GUNICORN_BIND", "0.0.0.0:8000")

# UvicornWorker provides async support required by FastAPI
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.getenv("GUNICORN_WORKERS", "2"))

# Requests are short; 30 seconds covers bcrypt hashing and SMTP dispatch
timeout = int(os.getenv("GUNICORN_TIMEOUT", "30"))
graceful_timeout = 30
keepalive = 2

# Logging to stdout/stderr (captured by systemd journald or docker)
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

proc_name = "finance_tracker"

# Keep False with SQLite: each worker opens its own connections after fork
preload_app = False
