"""
FastAPI application serving the terminal widget and its session API.
"""

import logging

from fastapi import FastAPI

from terminal_cv.api.routers import router as api_router
from terminal_cv.config.settings import settings

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Create FastAPI app
app = FastAPI(title="Terminal CV")
app.include_router(api_router)
