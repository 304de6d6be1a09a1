import os
from flask_pymongo import PyMongo
from pymongo.errors import PyMongoError

from crm_api.errors import DatabaseConfigError, DatabaseConnectionError

mongo = PyMongo()


def init_db(app, client=None):
    """Connect to MongoDB and attach the customer database to the app.

    Raises instead of degrading: a missing URI or an unreachable server
    must stop the process before any route is registered.
    """
    if client is None:
        mongo_uri = app.config.get("MONGODB_URI") or os.environ.get("MONGODB_URI")
        if not mongo_uri:
            raise DatabaseConfigError("MONGODB_URI environment variable is not set.")

        mongo.init_app(
            app,
            uri=mongo_uri,
            serverSelectionTimeoutMS=app.config["MONGO_SERVER_SELECTION_TIMEOUT_MS"],
        )
        client = mongo.cx
        try:
            client.admin.command("ping")
        except PyMongoError as e:
            raise DatabaseConnectionError(f"Could not connect to MongoDB: {e}") from e

    app.db = client[app.config["MONGO_DBNAME"]]
    app.logger.info("Connected successfully to MongoDB (database=%s)", app.config["MONGO_DBNAME"])
