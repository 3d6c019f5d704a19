# routes/meta.py
from flask import current_app
import logging
import time

from database import StoreError
from utils.responses import text_reply, json_reply

logger = logging.getLogger(__name__)


def list_routes():
    """Plain-text listing of the route table, one route per line."""
    return text_reply(current_app.extensions['kjv_router'].describe(), 200)


def health():
    """Health check endpoint that also verifies the database connection"""
    try:
        current_app.extensions['kjv_store'].ping()
    except StoreError as e:
        logger.error(f"Health check failed: {e}")
        return json_reply({
            'status': 'unhealthy',
            'database': 'error',
            'timestamp': time.time()
        }, 500)
    return json_reply({
        'status': 'healthy',
        'database': 'connected',
        'timestamp': time.time()
    })
