# gunicorn.conf.py
import os
import logging
import sys

# Configure logging to stdout
accesslog = '-'
errorlog = '-'
loglevel = os.getenv('LOG_LEVEL', 'info').lower()

# Get HOST/PORT from environment or use default
host = os.getenv('HOST', '0.0.0.0')
port = os.getenv('PORT', '8000')
bind = f"{host}:{port}"

# One sync worker with one thread: each request (database lookup included)
# finishes before the next one is accepted
workers = 1
threads = 1
worker_class = "sync"

# Log configuration on startup
def on_starting(server):
    logger = logging.getLogger('gunicorn.error')
    logger.setLevel(logging.INFO)
    logger.addHandler(logging.StreamHandler(sys.stdout))
    logger.info(f"Starting gunicorn with {workers} worker on {bind}")

timeout = 30
keepalive = 5

# Process naming
proc_name = "kjv_service"
default_proc_name = "kjv_service"

graceful_timeout = 10
