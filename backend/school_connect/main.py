from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import logging
import time
from school_connect.auth import router as auth_router
from school_connect.users import router as users_router
from school_connect.notifications import router as notifications_router
from school_connect.students import router as students_router
from school_connect.attendance import router as attendance_router
from school_connect.grades import router as grades_router
from school_connect.assignments import router as assignments_router
from school_connect.messages import router as messages_router
from school_connect.events import router as events_router
from school_connect.news import router as news_router
from school_connect.resources import router as resources_router
from school_connect.health import router as health_router
from school_connect.realtime import router as realtime_router
from school_connect.config.settings import settings
from school_connect.errors import register_exception_handlers
from mangum import Mangum

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)

# Prevent duplicate logs from uvicorn outside local development
if settings.APP_ENV != 'development':
    logging.getLogger("uvicorn.access").propagate = False
    logging.getLogger("uvicorn.error").propagate = False

logger = logging.getLogger(__name__)

def create_app() -> FastAPI:
    """Create and configure a FastAPI application."""
    logger.info(f"Creating FastAPI app - Environment: {settings.APP_ENV}")

    app = FastAPI(
        title=settings.API_TITLE,
        description=settings.API_DESCRIPTION,
        version=settings.API_VERSION,
        docs_url=settings.API_DOCS_URL,
        redoc_url=settings.API_REDOC_URL,
        openapi_url=settings.API_OPENAPI_URL
    )

    allowed_origins = settings.allowed_origins()
    logger.info(f"CORS allowed origins: {allowed_origins}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        logger.info(
            f"{request.method} {request.url.path} {response.status_code} "
            f"{(time.time() - start_time) * 1000:.1f} ms"
        )
        return response

    register_exception_handlers(app)

    # Include routers
    app.include_router(auth_router.router)
    app.include_router(users_router.router)
    app.include_router(notifications_router.router)
    app.include_router(students_router.router)
    app.include_router(attendance_router.router)
    app.include_router(grades_router.router)
    app.include_router(assignments_router.router)
    app.include_router(messages_router.router)
    app.include_router(events_router.router)
    app.include_router(news_router.router)
    app.include_router(resources_router.router)
    app.include_router(health_router.router)
    app.include_router(realtime_router.router)

    logger.info("FastAPI app created successfully")
    return app

app = create_app()

# AWS Lambda entry point for the REST surface (the /ws relay needs a long-lived server)
handler = Mangum(app, lifespan="off")

# For local development
if __name__ == '__main__':
    import uvicorn

    port = settings.PORT
    print(f"Starting FastAPI server on port {port}...")
    print(f"Environment: {settings.APP_ENV}")
    print(f"API Documentation: http://localhost:{port}{settings.API_DOCS_URL}")

    uvicorn.run(app,
                host="0.0.0.0",
                port=port,
                log_level="info",
                access_log=False)
