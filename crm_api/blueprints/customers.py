from flask import Blueprint, request, jsonify

from crm_api.errors import CustomerNotFound
from crm_api.models import find_customers, insert_customer, update_customer, delete_customer, UPDATABLE_FIELDS
from crm_api.serializers import to_json_value

customers_bp = Blueprint('customers', __name__)


def _json_object():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValueError("Request body must be a JSON object")
    return payload


@customers_bp.route('', methods=['GET'])
@customers_bp.route('/', methods=['GET'])
def list_customers():
    """List every customer. No filtering, sorting or pagination."""
    return jsonify([to_json_value(d) for d in find_customers()]), 200


@customers_bp.route('', methods=['POST'])
@customers_bp.route('/', methods=['POST'])
def create_customer():
    """Create a customer from any JSON object; nothing is validated."""
    doc = insert_customer(_json_object())
    return jsonify(to_json_value(doc)), 201


@customers_bp.route('/<customer_id>', methods=['PUT'], endpoint='update_customer')
def update_customer_route(customer_id):
    doc = update_customer(customer_id, _json_object())
    if doc is None:
        raise CustomerNotFound(customer_id)

    result = {'_id': str(doc['_id'])}
    for field in UPDATABLE_FIELDS:
        result[field] = doc.get(field)
    return jsonify(result), 200


@customers_bp.route('/<customer_id>', methods=['DELETE'], endpoint='delete_customer')
def delete_customer_route(customer_id):
    if not delete_customer(customer_id):
        raise CustomerNotFound(customer_id)
    return jsonify({'message': 'Customer deleted successfully'}), 200
