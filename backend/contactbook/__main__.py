"""Run the API with uvicorn: python -m contactbook"""

import uvicorn

from contactbook.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "contactbook.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
