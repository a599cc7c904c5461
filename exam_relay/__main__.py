# exam_relay/__main__.py
import uvicorn

from exam_relay.main import app, settings


def main() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
