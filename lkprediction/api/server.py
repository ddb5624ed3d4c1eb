"""Uvicorn entry point for the API server."""

import uvicorn
from dotenv import load_dotenv

from lkprediction.api.config import get_settings


def main(reload: bool = False):
    """Start the LKprediction API server."""
    load_dotenv()
    settings = get_settings()

    uvicorn.run(
        "lkprediction.api.app:create_app",
        host=settings.host,
        port=settings.port,
        reload=reload,
        factory=True,
    )


if __name__ == "__main__":
    main()
