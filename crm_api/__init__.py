from flask import Flask
from flask_cors import CORS

from crm_api.config import Config
from crm_api.db import init_db
from crm_api.errors import register_error_handlers


def create_app(config_object=None, client=None):
    """App factory.

    The database connection is established before any route exists, so a
    request can never race the connector. `client` lets callers supply an
    already-built MongoClient instead of connecting to MONGODB_URI.
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_object:
        app.config.from_object(config_object)
    app.logger.setLevel(app.config["LOG_LEVEL"])

    init_db(app, client=client)

    register_error_handlers(app)
    CORS(app)  # any origin

    from crm_api.blueprints.customers import customers_bp
    app.register_blueprint(customers_bp, url_prefix='/api/customers')

    return app
