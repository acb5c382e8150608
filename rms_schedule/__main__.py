import uvicorn

from rms_schedule.config import Settings


def main():
    settings = Settings.from_env()
    uvicorn.run("rms_schedule.web_app:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
