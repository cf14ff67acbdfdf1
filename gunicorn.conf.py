"""
Gunicorn config.

    gunicorn -c gunicorn.conf.py "app:create_app()"
"""

import multiprocessing
import os

# Bind / workers / threads (answers are CPU-light and stateless)
bind = os.getenv("BIND", "0.0.0.0:10000")
workers = int(os.getenv("WEB_CONCURRENCY", str(max(2, multiprocessing.cpu_count() // 2))))
threads = int(os.getenv("WEB_THREADS", "4"))

worker_class = "gthread"
timeout = int(os.getenv("WEB_TIMEOUT", "30"))
graceful_timeout = int(os.getenv("WEB_GRACEFUL_TIMEOUT", "10"))

# Logging: app logs go through app/logging_setup.py
loglevel = os.getenv("LOG_LEVEL", "info").lower()
accesslog = "-"
errorlog = "-"

preload_app = True

def when_ready(server):
    server.log.info("faq-voice ready on %s", bind)

def post_fork(server, worker):
    server.log.info("Worker spawned (pid: %s)", worker.pid)
