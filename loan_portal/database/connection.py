import logging
import re

import motor.motor_asyncio
from beanie import init_beanie

from loan_portal.core import settings
from loan_portal.database.models import Member, Service, LoanRequest

# Set up logging
logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger(__name__)



# Never log full connection URIs, they may contain credentials
def mask_mongo_uri(uri: str) -> str:
    m = re.match(r'(?P<prefix>mongodb(?:\+srv)?://)(?:(?P<creds>[^@]+)@)?(?P<rest>.+)', uri or "")
    if not m:
        return "mongodb://<redacted>"
    host_part = m.group('rest').split('/')[0]
    if m.group('creds'):
        return f"{m.group('prefix')}***@{host_part}"
    return f"{m.group('prefix')}{host_part}"


async def init_db():
    mongodb_uri = settings.MONGODB_URI
    mongodb_db_name = settings.MONGODB_DB_NAME

    if not mongodb_uri:
        logger.error("MONGODB_URI is not set in environment variables")
        raise RuntimeError("Configuration error: MONGODB_URI is not set in environment variables")
    if not mongodb_db_name:
        logger.error("MONGODB_DB_NAME is not set in environment variables")
        raise RuntimeError("Configuration error: MONGODB_DB_NAME is not set in environment variables")

    logger.info("Attempting to connect to MongoDB at: %s", mask_mongo_uri(mongodb_uri))
    logger.info("Database name: %s", mongodb_db_name)

    try:
        client = motor.motor_asyncio.AsyncIOMotorClient(
            mongodb_uri,
            tls=settings.MONGODB_TLS,
            serverSelectionTimeoutMS=30000,
            connectTimeoutMS=30000,
            socketTimeoutMS=30000,
        )

        await client.admin.command('ping')
        logger.info("Successfully connected to MongoDB!")

        database = client[mongodb_db_name]
        await init_beanie(database, document_models=[Member, Service, LoanRequest])
        logger.info("Beanie initialized successfully!")
        return database
    except Exception as e:
        logger.error(f"Database initialization failed: {str(e)}")
        logger.error(f"Exception type: {type(e)}")
        raise
