from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.middleware_correlation import CorrelationIdMiddleware
from app.core.logging import setup_logging
from app.core.errors import register_exception_handlers
from app.db.seed import seed_identity
from app.db.session import SessionLocal


# Routers
from fastapi import APIRouter
from app.api.routes.authors import router as authors_router
from app.api.routes.books import router as books_router
from app.api.routes.users import router as users_router


setup_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    db = SessionLocal()
    try:
        seed_identity(db, settings)
    finally:
        db.close()
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Bookstore API - manage authors and books, with role-based access.",
    version="1.0.0",
    openapi_url=f"{settings.API_STR}/openapi.json",
    lifespan=lifespan,
)

# CORS middleware - allow docs UI to make API requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:8000", "http://127.0.0.1:8000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Middlewares
app.add_middleware(CorrelationIdMiddleware)

# Root endpoint
@app.get("/")
async def root():
    """API root endpoint with basic information."""
    return {
        "message": "Welcome to Bookstore API",
        "version": "1.0.0",
        "docs_url": "/docs",
        "redoc_url": "/redoc",
        "api_str": settings.API_STR,
        "endpoints": {
            "authors": f"{settings.API_STR}/authors",
            "books": f"{settings.API_STR}/books",
            "users": f"{settings.API_STR}/users",
        },
        "authentication": {
            "type": "HTTP Basic",
            "authors": "Administrator or Customer to read, Administrator to write",
            "books": "open",
        },
    }

register_exception_handlers(app)

# Mount routers
api = APIRouter(prefix=settings.API_STR)
api.include_router(authors_router)
api.include_router(books_router)
api.include_router(users_router)
app.include_router(api)
