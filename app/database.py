"""MongoDB connection lifecycle management.

Uses a module-level singleton client. Call connect_db() at app startup
(via the FastAPI lifespan) or at the top of a script before using
get_database().
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from app.config import settings

client: Optional[AsyncIOMotorClient] = None
database_name: Optional[str] = None  # Fallback name chosen at connect time


def get_database() -> AsyncIOMotorDatabase:
    """Return the database named in the URI, or the connect-time fallback name."""
    if client is None:
        raise RuntimeError("Database client is not initialized. Call connect_db() first.")
    return client.get_default_database(database_name or settings.DATABASE_NAME)


async def connect_db(uri: Optional[str] = None, db_name: Optional[str] = None) -> None:
    """Create the client and ping the server.

    uri and db_name default to MONGODB_URI and DATABASE_NAME from settings;
    db_name is only used when the URI has no database path.

    Motor connects lazily, so the ping makes an unreachable server or bad
    credentials fail here instead of on the first query.
    """
    global client, database_name
    uri = uri or settings.MONGODB_URI
    if not uri:
        raise RuntimeError("MONGODB_URI is not set.")
    client = AsyncIOMotorClient(uri)
    database_name = db_name or settings.DATABASE_NAME
    await client.admin.command("ping")


async def disconnect_db() -> None:
    global client, database_name
    if client:
        client.close()
        client = None
        database_name = None
