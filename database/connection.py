# backend/database/connection.py
import logging
from typing import Optional

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from config import settings

logger = logging.getLogger("database.connection")

# ============================================================
# 🧩 INSTANCIAS GLOBALES (se crean en el primer uso)
# ============================================================
_client: Optional[MongoClient] = None
_db: Optional[Database] = None


# ============================================================
# 🔧 CLIENTE Y BASE
# ============================================================
def create_client(uri: str = None, timeout_ms: int = None) -> MongoClient:
    """Crea un MongoClient; no abre conexión hasta la primera operación."""
    return MongoClient(
        uri or settings.MONGODB_URI,
        serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS if timeout_ms is None else timeout_ms,
    )


def resolve_database(client: MongoClient) -> Database:
    """Usa la base indicada en la URI o, si no hay, MONGO_DB."""
    return client.get_default_database(default=settings.MONGO_DB)


def get_db() -> Database:
    global _client, _db
    if _db is None:
        _client = create_client()
        _db = resolve_database(_client)
        logger.info(f"✅ Cliente MongoDB listo para base: {_db.name}")
    return _db


def set_db(db) -> None:
    """Reemplaza la base compartida (tests, scripts)."""
    global _client, _db
    _client = None
    _db = db


def close_db() -> None:
    global _client, _db
    if _client is not None:
        _client.close()
        logger.info("🔌 Conexión MongoDB cerrada.")
    _client = None
    _db = None


# ============================================================
# 🩺 ESTADO
# ============================================================
def ping() -> bool:
    """True si la base responde."""
    try:
        get_db().list_collection_names()
        return True
    except PyMongoError as e:
        logger.warning(f"⚠️ MongoDB no responde: {e}")
        return False


# ============================================================
# 🚀 INICIALIZACIÓN DE ÍNDICES
# ============================================================
def init_db() -> Database:
    db = get_db()
    try:
        db["users"].create_index([("email", ASCENDING)], unique=True)
        db["users"].create_index([("status", ASCENDING)])
        db["posts"].create_index([("author_id", ASCENDING)])
        logger.info("✅ Índices de users/posts verificados.")
    except PyMongoError as e:
        # el servidor sigue arriba; las peticiones devolverán 503 mientras la base no responda
        logger.error(f"❌ No se pudieron crear los índices: {e}")
    return db
