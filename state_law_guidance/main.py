"""
Entry point for running the State Law Guidance API with uvicorn.
"""

import logging
import os

import uvicorn

from state_law_guidance.config import get_settings

logger = logging.getLogger(__name__)


def main():
    """Main entry point for the application."""
    settings = get_settings()
    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Starting {settings.app_name} on port {port}")

    uvicorn.run(
        "state_law_guidance.api.app:app",
        host="0.0.0.0",
        port=port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
