"""Entry point for running the currency admin Flask app."""

from __future__ import annotations

import os

from dotenv import load_dotenv

# config.py reads the environment at import time, so `.env` must load first.
load_dotenv(os.path.join(os.path.abspath(os.path.dirname(__file__)), ".env"))

from app import create_app  # noqa: E402


def main() -> None:
    """Create the Flask app and run the development server."""

    app = create_app(config_name=os.getenv("APP_ENV"))

    host = os.getenv("FLASK_RUN_HOST", "0.0.0.0")
    port = int(os.getenv("FLASK_RUN_PORT", "5000"))
    app.run(host=host, port=port, debug=app.config.get("DEBUG", False))


if __name__ == "__main__":
    main()
