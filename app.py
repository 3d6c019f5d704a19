# app.py
from flask import Flask, request, g
from flask_cors import CORS
from routes import build_router
from database import KjvStore
from config import Config
import logging
import time
import sys

# Configure logging to output to stdout
logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

DISPATCH_METHODS = ['GET', 'POST', 'PUT', 'PATCH', 'DELETE']


def create_app(config=None):
    """Build the Flask app; ``config`` overrides values from Config."""
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    # Preserve order of keys in JSON responses
    app.json.sort_keys = False
    app.json.compact = True

    CORS(app, resources={
        r"/kjv/*": {
            "origins": app.config['CORS_ORIGINS'],
            "methods": ["GET", "POST", "OPTIONS"],
            "allow_headers": ["Content-Type"],
        }
    })

    logger.info("Opening KJV store...")
    app.extensions['kjv_store'] = KjvStore(app.config['KJV_DATABASE_URL'])
    app.extensions['kjv_router'] = build_router()

    def dispatch(path):
        # Every request goes through the glob router, Flask only hands it over
        return app.extensions['kjv_router'].dispatch(request.path, request.method)

    app.add_url_rule('/', 'dispatch', dispatch, defaults={'path': ''}, methods=DISPATCH_METHODS)
    app.add_url_rule('/<path:path>', 'dispatch', dispatch, methods=DISPATCH_METHODS)

    @app.before_request
    def before_request():
        g.start_time = time.time()

    @app.after_request
    def after_request(response):
        # Log request duration
        duration = time.time() - g.get('start_time', time.time())
        logger.info(f"{request.method} {request.path} -> {response.status_code} took {duration:.3f} seconds")
        return response

    return app


app = create_app()

if __name__ == '__main__':
    logger.info(f"Server started on http://{app.config['HOST']}:{app.config['PORT']}")
    # Single thread: one request is handled end to end before the next
    app.run(host=app.config['HOST'], port=app.config['PORT'], threaded=False)
