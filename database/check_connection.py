"""
check_connection.py — Diagnóstico de conectividad con MongoDB
-------------------------------------------------------------
Abre una conexión con MONGODB_URI (o --uri), lista las colecciones
existentes y cierra la conexión. Sale con código 1 si no puede conectar.

Uso:
    python -m database.check_connection [--uri mongodb://host:27017/db]
"""

import argparse
import sys
from typing import Optional, Sequence

from pymongo.errors import PyMongoError

from config import settings
from database.connection import create_client, resolve_database


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Prueba de conexión a MongoDB")
    parser.add_argument("--uri", default=settings.MONGODB_URI, help="URI de conexión")
    parser.add_argument(
        "--timeout-ms",
        type=int,
        default=settings.MONGO_TIMEOUT_MS,
        help="Tiempo máximo de selección de servidor (ms)",
    )
    return parser.parse_args(argv)


def check_connection(uri: str, timeout_ms: int) -> list:
    """Devuelve los nombres de colección; propaga PyMongoError si falla."""
    client = create_client(uri, timeout_ms)
    try:
        db = resolve_database(client)
        return db.list_collection_names()
    finally:
        client.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    print(f"🔌 Intentando conectar a MongoDB: {args.uri}")

    try:
        collections = check_connection(args.uri, args.timeout_ms)
    except PyMongoError as e:
        print(f"❌ Error de conexión a MongoDB: {e}", file=sys.stderr)
        sys.exit(1)

    print("✅ Conectado a MongoDB")
    print(f"📚 Colecciones disponibles: {sorted(collections)}")
    print("🔌 Conexión cerrada")
    return 0


if __name__ == "__main__":
    sys.exit(main())
