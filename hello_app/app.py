import logging
import os
import sys

from flask import Flask
from werkzeug.serving import BaseWSGIServer, make_server

from hello_app.config import DEFAULT_HOST, PORT_ENV_VAR, parse_port, resolve_port

GREETING = "Hello from Node.js on GKE via LoadBalancer! 🚀"

app = Flask(__name__)


@app.route("/")
def hello():
    """Returns the static greeting."""
    return GREETING


# --- Server lifecycle ---
def create_server(port: int, host: str = DEFAULT_HOST) -> BaseWSGIServer:
    """Binds a threaded WSGI server for the app on ``host:port``.

    The socket is listening once this returns. A bind failure raises
    ``SystemExit`` with a non-zero code.
    """
    return make_server(host, port, app, threaded=True)


def main() -> None:
    """Launch command: read PORT once, bind, and serve until the process dies."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stdout,
    )

    raw_port = os.environ.get(PORT_ENV_VAR)
    port = resolve_port(raw_port)
    if raw_port and parse_port(raw_port) is None:
        app.logger.warning(f"Ignoring invalid {PORT_ENV_VAR} value {raw_port!r}, using {port}")

    try:
        server = create_server(port)
    except SystemExit:
        app.logger.error(f"Could not bind to port {port}, exiting.")
        raise

    app.logger.info(f"App listening on port {port}")
    server.serve_forever()


if __name__ == "__main__":
    main()
