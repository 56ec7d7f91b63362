from flask import Flask, Response, jsonify, request
from werkzeug.serving import make_server
import requests
import logging
from typing import Optional
import signal
import sys

from common.log import setup_logging
from frontend.config import Settings

logger = logging.getLogger(__name__)

# Hop-by-hop and length headers are recomputed by our own server
DROPPED_HEADERS = {'connection', 'content-encoding', 'content-length', 'transfer-encoding'}


def create_app(settings: Optional[Settings] = None) -> Flask:
    if settings is None:
        settings = Settings.from_env()

    # Everything under static/ is served from the site root
    app = Flask(__name__, static_folder='static', static_url_path='')
    app.config['SETTINGS'] = settings

    # --- Static site ---
    @app.route('/')
    def home():
        return app.send_static_file('index.html')

    # --- Backend forwarding ---
    @app.route('/api/<path:path>')
    def forward(path):
        url = f'{settings.backend_url}/api/{path}'
        try:
            # Short timeout so the page doesn't hang if the backend is down
            upstream = requests.get(
                url,
                params=request.args.to_dict(flat=False),
                timeout=settings.backend_timeout,
            )
        except requests.RequestException as e:
            logger.warning('Backend request to %s failed: %s', url, e)
            return jsonify({'error': str(e), 'backend': settings.backend_url}), 502

        headers = [
            (name, value) for name, value in upstream.headers.items()
            if name.lower() not in DROPPED_HEADERS
        ]
        return Response(upstream.content, status=upstream.status_code, headers=headers)

    return app


def build_server(settings: Settings, app: Optional[Flask] = None):
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
        logger.error('Cannot listen on %s:%d', settings.host, settings.port)
        return 1

    signal.signal(signal.SIGTERM, _stop)
    logger.info('Frontend on http://localhost:%d, backend at %s', settings.port, settings.backend_url)
    server.serve_forever()
    logger.info('Shutting down')
    return 0


app = create_app()

if __name__ == '__main__':
    sys.exit(main())
