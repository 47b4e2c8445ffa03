import uvicorn

from country_admin.config import settings


def main():
    """Serve the app with uvicorn, e.g. `python -m country_admin`."""
    uvicorn.run(
        "country_admin.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
