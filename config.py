# backend/config.py
import os
from dotenv import load_dotenv
from pathlib import Path

# ============================================================
# 🌍 DETECTAR ENTORNO Y CARGAR .env CORRESPONDIENTE
# ============================================================
ENV = os.getenv("ENV", "development")

env_file = ".env.production" if ENV == "production" else ".env.development"
dotenv_path = Path(__file__).resolve().parent / env_file
load_dotenv(dotenv_path)

# ============================================================
# ⚙️ CONFIGURACIÓN GENERAL
# ============================================================
class Settings:
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "ChatApp")
    VERSION: str = os.getenv("VERSION", "1.0")

    # 🔹 MongoDB (usuarios y posts)
    MONGODB_URI: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017/chat-app")
    MONGO_DB: str = os.getenv("MONGO_DB", "chat-app")  # si la URI no trae base
    MONGO_TIMEOUT_MS: int = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

    # 🔹 Auth
    SECRET_KEY: str = os.getenv("SECRET_KEY", "supersecret")
    JWT_EXPIRES_MINUTES: int = int(os.getenv("JWT_EXPIRES_MINUTES", str(7 * 24 * 60)))

    # 🔹 Otros
    ALLOWED_ORIGINS: list = os.getenv("ALLOWED_ORIGINS", "*").split(",")
    DEBUG: bool = ENV == "development"
    ENV: str = ENV

settings = Settings()
