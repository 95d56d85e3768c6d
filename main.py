from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, APIRouter, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.middleware.request_logging import RequestLoggingMiddleware
from app.routes.baby_routes import router as baby_routes
from app.routes.word_routes import router as word_routes
from app.routes.stats_routes import router as stats_routes
from config.database import init_db
from config.logging_config import configure_logging
from config.settings import APP_TITLE, CORS_ORIGINS, LOG_LEVEL

configure_logging(LOG_LEVEL)
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Create the tables once per process
    init_db()
    logger.info("api_startup", title=APP_TITLE)
    yield
    logger.info("api_shutdown")


# Create the FastAPI instance
app = FastAPI(
    title=APP_TITLE,
    version="1.0.0",
    description="API for tracking words spoken by your baby",
    docs_url="/api-docs",
    redoc_url=None,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("database_error", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=500, content={"error": str(exc)})


# Main router with the /api prefix
routerAPI = APIRouter(prefix="/api")

routerAPI.include_router(baby_routes)
routerAPI.include_router(word_routes)
routerAPI.include_router(stats_routes)
# Attach the router to the main application
app.include_router(routerAPI)


@app.get("/", tags=["Root"])
async def read_root():
    return {"status": "What Today Words API is running"}
