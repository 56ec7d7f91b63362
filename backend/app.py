"""
Backend API for the two-service container demo.

Endpoints:
  GET /          - Welcome message
  GET /api/data  - Sample JSON payload stamped with the current time
"""

import logging
import signal
import sys
from datetime import datetime, timezone
from typing import Optional

from flask import Flask, g, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import BadRequest, MethodNotAllowed, NotFound
from werkzeug.serving import make_server

from backend.config import Settings
from common.log import setup_logging

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = 'Welcome to the Backend API!'
SAMPLE_MESSAGE = 'This is some sample data from the backend!'


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. 2026-10-16T09:30:12.345Z"""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def sample_data(now: datetime) -> dict:
    return {
        'message': SAMPLE_MESSAGE,
        'timestamp': format_timestamp(now),
    }


def parse_body():
    """
    Parse JSON and URL-encoded bodies before the route runs.
    Malformed JSON gives a 400, oversized bodies a 413. The result is kept
    on ``g.body`` for routes that want it.
    """
    g.body = None
    if request.is_json:
        if not request.get_data(cache=True):
            return
        payload = request.get_json()
        # Only objects and arrays are accepted at the top level
        if not isinstance(payload, (dict, list)):
            raise BadRequest('JSON body must be an object or an array')
        g.body = payload
    elif request.mimetype == 'application/x-www-form-urlencoded':
        g.body = request.form


def create_app(settings: Optional[Settings] = None) -> Flask:
    if settings is None:
        settings = Settings.from_env()

    app = Flask(__name__)
    app.config['MAX_CONTENT_LENGTH'] = settings.body_limit
    app.config['SETTINGS'] = settings

    # Any origin, no credentials
    CORS(app)
    app.before_request(parse_body)

    # Known path, other method: answered like any unmatched request
    @app.errorhandler(MethodNotAllowed)
    def method_not_allowed(e):
        return NotFound().get_response()

    @app.route('/')
    def welcome():
        return WELCOME_MESSAGE

    @app.route('/api/data')
    def data():
        return jsonify(sample_data(datetime.now(timezone.utc)))

    return app


def build_server(settings: Settings, app: Optional[Flask] = None):
    """Bind the listening socket; werkzeug exits with status 1 if the port is unavailable."""
    if app is None:
        app = create_app(settings)
    return make_server(settings.host, settings.port, app, threaded=True)


def _stop(signum, frame):
    raise KeyboardInterrupt


def main() -> int:
    setup_logging()
    settings = app.config['SETTINGS']

    try:
        server = build_server(settings, app)
    except (OSError, SystemExit):
        # werkzeug reports bind errors on stderr and exits on its own
        logger.error('Cannot listen on %s:%d', settings.host, settings.port)
        return 1

    signal.signal(signal.SIGTERM, _stop)
    logger.info('Server is running on http://localhost:%d', settings.port)
    # Returns once interrupted; werkzeug closes the socket itself
    server.serve_forever()
    logger.info('Shutting down')
    return 0


app = create_app()

if __name__ == '__main__':
    sys.exit(main())
