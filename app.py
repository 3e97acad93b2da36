# app.py - Hello World video demo server

from flask import Flask
import logging
import sys

from config import Config
from listener import BindError, start

logger = logging.getLogger(__name__)

GREETING = '👋 Hello World from video demo'

# ===========================
# Flask App Setup
# ===========================
def create_app(greeting=GREETING):
    app = Flask(__name__)

    # ===========================
    # Routes
    # ===========================
    @app.route('/', methods=['GET'])
    def home():
        return greeting

    return app

# ===========================
# Run the App
# ===========================
def main():
    try:
        cfg = Config()
    except ValueError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(f"❌ Invalid configuration: {e}")
        sys.exit(1)

    logging.basicConfig(level=cfg.log_level)
    # The listening line is reported even when LOG_LEVEL is quieter than INFO
    if cfg.log_level > logging.INFO:
        logging.getLogger('listener').setLevel(logging.INFO)

    app = create_app()
    try:
        server = start(app, cfg.port, host=cfg.host)
    except BindError as e:
        logger.error(f"❌ Could not start server: {e}")
        sys.exit(1)

    try:
        server.wait()
    except KeyboardInterrupt:
        logger.info("🛑 Shutting down...")
    finally:
        server.stop()

if __name__ == '__main__':
    main()
