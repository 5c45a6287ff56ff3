"""Local entry point: run the API with uvicorn using configured host/port."""

import os
import sys

import uvicorn

# Add the src directory to Python path
current_dir = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, os.path.join(current_dir, "src"))

from clinicbook.core.config import get_settings  # noqa: E402


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "clinicbook.app:app",
        host=settings.host,
        port=int(os.environ.get("PORT", settings.port)),
        reload=settings.is_development and settings.debug,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    main()
