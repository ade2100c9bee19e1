from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import ConnectionFailure, DuplicateKeyError, PyMongoError
from config import settings
from database.connection import init_db, close_db, ping
import logging

# =====================================================
# * Importación de Routers
# =====================================================
from auth.routes import router as auth_router
from routes.user_routes import router as user_router
from routes.post_routes import router as post_router

# =====================================================
# * Configuración de Logging global
# =====================================================
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s"
)
logger = logging.getLogger("main")

# =====================================================
# * Ciclo de vida: índices al arrancar, cierre al apagar
# =====================================================
@asynccontextmanager
async def lifespan(application: FastAPI):
    init_db()
    logger.info("✅ Base de datos inicializada correctamente y aplicación lista.")
    yield
    close_db()

# =====================================================
# * Inicialización de la aplicación
# =====================================================
app = FastAPI(
    title=f"{settings.PROJECT_NAME} Backend",
    version=settings.VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# =====================================================
# * Configuración CORS
# =====================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =====================================================
# * Cuerpo inválido -> 400 (igual que ValidationError)
# =====================================================
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"⚠️ Petición inválida en {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

# =====================================================
# * Errores de MongoDB -> respuesta JSON
# =====================================================
@app.exception_handler(PyMongoError)
async def mongo_error_handler(request: Request, exc: PyMongoError):
    if isinstance(exc, DuplicateKeyError):
        logger.warning(f"⚠️ Clave duplicada en {request.url.path}: {exc}")
        return JSONResponse(status_code=400, content={"detail": "Duplicate field value entered"})
    if isinstance(exc, ConnectionFailure):
        logger.error(f"❌ MongoDB no disponible en {request.url.path}: {exc}")
        return JSONResponse(status_code=503, content={"detail": "Base de datos no disponible."})
    logger.exception(f"❌ Error de MongoDB en {request.url.path}")
    return JSONResponse(status_code=500, content={"detail": "Something went wrong"})

# =====================================================
# * Registro de Rutas
# =====================================================
app.include_router(auth_router, prefix="/auth", tags=["Auth"])
app.include_router(user_router, prefix="/users", tags=["Users"])
app.include_router(post_router, prefix="/posts", tags=["Posts"])

logger.info("📜 Routers registrados:")
logger.info(" - /auth -> AuthRouter")
logger.info(" - /users -> UserRouter")
logger.info(" - /posts -> PostRouter")

# =====================================================
# * Ruta raíz y health check
# =====================================================
@app.get("/", summary="Ruta raíz del backend")
def root():
    return {
        "message": f"🚀 {settings.PROJECT_NAME} Backend activo",
        "version": settings.VERSION,
        "env": settings.ENV
    }


@app.get("/api/health", summary="Estado del servidor y de MongoDB")
def health():
    return {
        "status": "success",
        "message": "Server is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.ENV,
        "mongodb": "connected" if ping() else "disconnected",
    }

# =====================================================
# * Mensaje de arranque
# =====================================================
logger.info(f"🌍 {settings.PROJECT_NAME} backend iniciado en modo '{settings.ENV}'.")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
