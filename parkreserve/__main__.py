"""Run the API with uvicorn: ``python -m parkreserve``."""

import uvicorn

from parkreserve.config import settings


def main():
    uvicorn.run(
        "parkreserve.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
