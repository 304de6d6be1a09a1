import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    PORT = int(os.environ.get('PORT', 10000))
    MONGODB_URI = os.environ.get('MONGODB_URI')
    MONGO_DBNAME = os.environ.get('MONGO_DBNAME', 'crm-database')
    CUSTOMERS_COLLECTION = 'customers'

    # Only bounds the startup ping; requests use driver defaults
    MONGO_SERVER_SELECTION_TIMEOUT_MS = int(os.environ.get('MONGO_SERVER_SELECTION_TIMEOUT_MS', 5000))

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
