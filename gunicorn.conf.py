# Bind & workers
import os

bind = os.getenv("GUNICORN_BIND", "0.0.0.0:8000")
workers = int(os.getenv("GUNICORN_WORKERS", "2"))
# Argon2 hashing blocks its thread; keep a few per worker
threads = int(os.getenv("GUNICORN_THREADS", "4"))
timeout = 60
graceful_timeout = 30
keepalive = 5

wsgi_app = "cubechrono:create_app()"

# Logs to stdout/stderr
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()

# Proxy headers (ProxyFix handles X-Forwarded-* in the app)
forwarded_allow_ips = "*"
proxy_protocol = False
