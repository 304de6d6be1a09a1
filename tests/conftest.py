import mongomock
import pytest

from crm_api import create_app


class TestConfig:
    TESTING = True
    MONGODB_URI = "mongodb://localhost:27017"
    MONGO_DBNAME = "crm-test"


@pytest.fixture()
def mongo_client():
    return mongomock.MongoClient()


@pytest.fixture()
def app(mongo_client):
    return create_app(TestConfig, client=mongo_client)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def customers(mongo_client):
    """Direct handle on the backing collection, for arranging and asserting."""
    return mongo_client["crm-test"]["customers"]
