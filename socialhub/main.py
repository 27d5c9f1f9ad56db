"""FastAPI main application with the Socket.IO layer mounted alongside."""

from contextlib import asynccontextmanager

import socketio
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .db import DatabaseConnection
from .realtime import PresenceRegistry, EventEmitter, ConnectionLifecycle, create_socket_server
from .utils.logger import init_app_logger
from .api import register_exception_handlers
from .api.v1 import deps, users_router, posts_router, messages_router


# Initialize logger
logger = init_app_logger(settings)

# Realtime layer, shared by every request for the life of the process
registry = PresenceRegistry()
lifecycle = ConnectionLifecycle(registry)
sio = create_socket_server(lifecycle, settings)
emitter = EventEmitter(registry, sio)

# Global database connection
db_connection: DatabaseConnection = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    Args:
        app: FastAPI application instance
    """
    # Startup
    logger.info("=" * 70)
    logger.info("Starting SocialHub...")
    logger.info("=" * 70)

    logger.info("")
    logger.info("📡 Server Configuration:")
    logger.info(f"  Host: {settings.host}")
    logger.info(f"  Port: {settings.port}")
    logger.info(f"  Debug: {settings.debug}")
    logger.info(f"  CORS Origins: {', '.join(settings.get_cors_origins())}")
    logger.info(f"  Log Level: {settings.log_level}")
    logger.info(f"  Log File: {settings.log_file}")

    logger.info("")
    logger.info("🔌 Realtime Configuration:")
    logger.info(f"  Socket.IO Path: /{settings.socketio_path}")
    logger.info(f"  userId Handshake: {'enabled' if settings.allow_user_id_handshake else 'disabled'}")

    if settings.jwt_secret == "change-me":
        logger.warning("  JWT secret is the default value; set JWT_SECRET in production")

    logger.info("")
    logger.info("🗄️  Opening Database...")
    global db_connection
    db_connection = DatabaseConnection(settings.database_path)

    # Set shared state in API modules
    deps.db_conn = db_connection
    deps.emitter = emitter
    deps.settings = settings

    logger.info("")
    logger.info("=" * 70)
    logger.info("✅ SocialHub started successfully!")
    logger.info(f"📍 Access at: http://{settings.host}:{settings.port}")
    logger.info(f"📚 API Docs: http://{settings.host}:{settings.port}/docs")
    logger.info("=" * 70)

    yield

    # Shutdown
    logger.info("")
    logger.info("=" * 70)
    logger.info("Shutting down SocialHub...")
    logger.info("=" * 70)

    registry.clear()
    if db_connection:
        db_connection.close()

    logger.info("✅ SocialHub shut down successfully")


# Create FastAPI application
app = FastAPI(
    title="SocialHub",
    description="Social network backend with realtime messaging and notifications",
    version="1.0.0",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API routers
app.include_router(users_router)
app.include_router(posts_router)
app.include_router(messages_router)


@app.get("/health")
async def health():
    """
    Simple health check endpoint.

    Returns:
        Health status
    """
    return {
        "status": "healthy",
        "service": "SocialHub",
        "version": "1.0.0",
        "online_users": len(registry)
    }


# ASGI entrypoint: Socket.IO traffic on /socket.io, everything else to FastAPI
asgi_app = socketio.ASGIApp(sio, other_asgi_app=app, socketio_path=settings.socketio_path)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "socialhub.main:asgi_app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
