"""
Attendance Token Registry - FastAPI Backend
Main application entry point
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from app.core.config import settings
from app.core.db import engine, Base
from app.api import routes_events, routes_tokens, routes_public
from app.services.errors import RegistryError
from app.utils.responses import registry_error_handler

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    # Create database tables
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")
    yield
    logger.info("Application shutdown")

# Create FastAPI application
app = FastAPI(
    title="Attendance Token Registry",
    description="Event-scoped attendance tokens with sequential ids and transferable ownership",
    version="1.0.0",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Registry failures become ErrorResponse bodies
app.add_exception_handler(RegistryError, registry_error_handler)

# Include routers
app.include_router(routes_public.router, tags=["public"])
app.include_router(routes_events.router, tags=["events"])
app.include_router(routes_tokens.router, tags=["tokens"])

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="127.0.0.1",
        port=8000,
        reload=True
    )
