"""
Run the API server:

  python -m myflix
"""

from dotenv import load_dotenv

load_dotenv()

import uvicorn

from myflix.core.config import get_settings
from myflix.core.logging import configure_logging


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    uvicorn.run(
        "myflix.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
