#!/usr/bin/env python3
import logging
import time
from threading import Thread

import requests
from werkzeug.serving import make_server

from . import config, create_app

logger = logging.getLogger(__name__)


def configure_logging(level=config.LOG_LEVEL, filename=config.LOG_FILE):
    """Configure root logging once for the process"""
    logging.basicConfig(
        level=level,
        format=config.LOG_FORMAT,
        filename=filename
    )


class TodoServer:
    """Threaded HTTP server for the todo app, run from a background thread."""

    def __init__(self, app, host=config.HOST, port=config.PORT):
        self.app = app
        self._server = make_server(host, port, app, threaded=True)
        self._thread = None

    @property
    def host(self):
        return self._server.host

    @property
    def port(self):
        return self._server.server_port

    @property
    def url(self):
        return f"http://{self.host}:{self.port}"

    def start(self):
        self._thread = Thread(target=self._server.serve_forever, daemon=True)
        self._thread.start()
        logger.info(f"Serving todo app on {self.url}")
        return self._thread

    def shutdown(self):
        # shutdown() blocks forever unless serve_forever is running
        if self._thread is not None:
            self._server.shutdown()
            self._thread.join()
            self._thread = None
        self._server.server_close()
        logger.info("Todo app stopped")


def wait_until_ready(base_url, attempts=config.READY_ATTEMPTS,
                     interval=config.READY_INTERVAL, timeout=config.READY_TIMEOUT):
    """Poll the JSON listing until the app answers with 200"""
    for attempt in range(1, attempts + 1):
        try:
            response = requests.get(f"{base_url}/todos", timeout=timeout)
            if response.status_code == 200:
                logger.info("Todo app is accepting requests")
                return True
            logger.info(f"Waiting for app to start (attempt {attempt}/{attempts})...")
        except requests.RequestException:
            logger.info(f"Waiting for app to start (attempt {attempt}/{attempts})...")
        if attempt < attempts:
            time.sleep(interval)

    logger.error("Timed out waiting for todo app to start")
    return False


def main():
    configure_logging()
    server = TodoServer(create_app(), config.HOST, config.PORT)
    thread = server.start()

    if not wait_until_ready(server.url):
        server.shutdown()
        return 1

    try:
        while thread.is_alive():
            thread.join(timeout=1)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    finally:
        server.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
