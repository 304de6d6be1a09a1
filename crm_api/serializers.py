from datetime import datetime, timezone
from bson import ObjectId


def to_json_value(value):
    """Turn BSON-only values into something jsonify can emit."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        # PyMongo hands back naive datetimes; they are UTC
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat()
    if isinstance(value, dict):
        return {k: to_json_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [to_json_value(v) for v in value]
    return value
