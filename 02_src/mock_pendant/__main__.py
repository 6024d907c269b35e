"""Serve the mock pendant: python -m mock_pendant"""

import os

import uvicorn
from dotenv import load_dotenv

from pendant_demo.config import PROJECT_ROOT
from pendant_demo.logging_config import setup_logging

from .api import create_mock_pendant_app
from .state import MockPendantService


def main():
    """Run the mock pendant service."""
    load_dotenv(PROJECT_ROOT / ".env")
    setup_logging(log_file=str(PROJECT_ROOT / "04_logs" / "mock_pendant.log"))

    host = os.getenv("MOCK_PENDANT_HOST", "localhost")
    port = int(os.getenv("MOCK_PENDANT_PORT", "20080"))
    service = MockPendantService(
        language=os.getenv("MOCK_PENDANT_LANGUAGE", "en"),
        locale=os.getenv("MOCK_PENDANT_LOCALE", "en"),
    )

    uvicorn.run(
        create_mock_pendant_app(service),
        host=host,
        port=port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
