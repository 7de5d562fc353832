"""Entry point for running the application with uvicorn."""

import logging

import uvicorn

from nis_payroll.config import get_settings


def main() -> None:
    """Run the application."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    uvicorn.run(
        "nis_payroll.api.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
