import uvicorn

from liftlog.settings import get_settings


def main() -> None:
    s = get_settings()
    uvicorn.run(
        "liftlog.main:app",
        host=s.SERVER_HOST,
        port=s.SERVER_PORT,
        log_level=s.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
