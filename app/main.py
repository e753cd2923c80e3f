"""
Main entry point for the FastAPI application.

- Initializes the FastAPI app
- Includes all API routers
- Registers the error handlers
- Adds CORS middleware
"""

# app/main.py
from fastapi import FastAPI
from app.api.v1.router import api_router
from fastapi.middleware.cors import CORSMiddleware
from app.utils.error_handler import register_exception_handlers

import logging
from app.core import logging_config  # noqa: F401
logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

app = FastAPI(title="Games Catalog Backend")

# Allow CORS for all origins (adjust in production)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Routes are served under /api (e.g. /api/games)
app.include_router(api_router, prefix="/api")
