"""
FastAPI application exposing the working-directory tools over HTTP.
"""

import logging

from fastapi import FastAPI

from cwdkit.api.routers import router as api_router
from cwdkit.config.settings import settings

# Create FastAPI app
app = FastAPI(title="cwdkit")
app.include_router(api_router)

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
