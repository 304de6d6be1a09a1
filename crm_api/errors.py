"""Exceptions and the single error-to-response mapping for the API."""
from flask import current_app, jsonify, request
from werkzeug.exceptions import HTTPException


class DatabaseConfigError(RuntimeError):
    """MongoDB connection string missing at startup."""


class DatabaseConnectionError(RuntimeError):
    """MongoDB unreachable at startup."""


class DatabaseNotInitialized(Exception):
    pass


class CustomerNotFound(Exception):
    pass


# endpoint -> (what was being done, message returned to the client)
FAILURES = {
    "customers.list_customers": ("fetching customers", "Failed to fetch customers"),
    "customers.create_customer": ("creating customer", "Failed to create customer"),
    "customers.update_customer": ("updating customer", "Failed to update customer"),
    "customers.delete_customer": ("deleting customer", "Failed to delete customer"),
}


def register_error_handlers(app):

    @app.errorhandler(CustomerNotFound)
    def handle_not_found(e):
        return jsonify({"message": "Customer not found"}), 404

    @app.errorhandler(DatabaseNotInitialized)
    def handle_db_not_initialized(e):
        return jsonify({"message": "Database not initialized"}), 500

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        # routing errors (unknown path, wrong method) keep their own status
        if isinstance(e, HTTPException):
            return e

        action, message = FAILURES.get(request.endpoint, ("handling request", "Internal server error"))
        current_app.logger.exception("Error %s (%s %s): %s", action, request.method, request.path, e)
        return jsonify({"message": message}), 500
