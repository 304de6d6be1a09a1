import logging
import sys

from crm_api import create_app
from crm_api.config import Config

logger = logging.getLogger("crm_api")


def main():
    """Run the API on Flask's built-in server.

    This is the development server; in production serve `create_app()` from
    a WSGI server such as gunicorn instead.
    """
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        app = create_app()
    except RuntimeError as e:
        logger.critical("FATAL ERROR: %s", e)
        sys.exit(1)

    logger.info("Server running on port %s", app.config["PORT"])
    app.run(host="0.0.0.0", port=app.config["PORT"])


if __name__ == "__main__":
    main()
