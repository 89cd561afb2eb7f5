import uvicorn

from thumbnail_generator.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("thumbnail_generator.app:app", host=settings.app_host, port=settings.app_port)


if __name__ == "__main__":
    main()
