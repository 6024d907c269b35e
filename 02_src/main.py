"""Main entry point for the demo extension."""

import asyncio
import sys

from dotenv import load_dotenv

from pendant_demo import ExtensionSettings, run_extension
from pendant_demo.config import PROJECT_ROOT
from pendant_demo.logging_config import setup_logging


def main() -> int:
    """Run the extension until the pendant service shuts down."""
    load_dotenv(PROJECT_ROOT / ".env")

    settings = ExtensionSettings.from_env()
    setup_logging(log_level=settings.log_level)

    try:
        return asyncio.run(run_extension(settings))
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())
