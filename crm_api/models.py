# crm_api/models.py
from datetime import datetime, timezone
from bson import ObjectId
from flask import current_app
from pymongo import ReturnDocument

from crm_api.errors import DatabaseNotInitialized

UPDATABLE_FIELDS = ("name", "email", "phone")


def customers_collection():
    db = getattr(current_app, "db", None)
    if db is None:
        raise DatabaseNotInitialized()
    return db[current_app.config["CUSTOMERS_COLLECTION"]]


def _now():
    now = datetime.now(timezone.utc)
    # MongoDB keeps millisecond precision; match it so the create response equals what is stored
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


# ---- Customers ----
def find_customers():
    """All customers, in whatever order the server returns them."""
    return list(customers_collection().find({}))


def insert_customer(payload):
    """Stamp createdAt, insert, and return the document with its new _id."""
    doc = dict(payload)
    # ids are always assigned by the store
    doc.pop("_id", None)
    doc["createdAt"] = _now()
    result = customers_collection().insert_one(doc)
    doc["_id"] = result.inserted_id
    return doc


def update_customer(customer_id, data):
    """
    Set whichever of name/email/phone are present in `data`; everything else
    in `data` is ignored and unspecified fields keep their stored value.
    Returns the stored _id/name/email/phone after the update, or None if no
    customer has this id.
    """
    query = {"_id": ObjectId(customer_id)}
    projection = {field: 1 for field in UPDATABLE_FIELDS}
    changes = {field: data[field] for field in UPDATABLE_FIELDS if field in data}

    coll = customers_collection()
    if not changes:
        # an empty $set is rejected by the server
        return coll.find_one(query, projection)
    return coll.find_one_and_update(
        query,
        {"$set": changes},
        projection=projection,
        return_document=ReturnDocument.AFTER,
    )


def delete_customer(customer_id):
    """Returns True if a document was removed."""
    result = customers_collection().delete_one({"_id": ObjectId(customer_id)})
    return result.deleted_count > 0
