"""
Command-line entry point.

    python -m blog_api

Starts uvicorn on the HOST and PORT read from the environment.
"""

import uvicorn

from blog_api.config.settings import settings


def main() -> None:
    """Run the API server."""
    uvicorn.run(
        "blog_api.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
