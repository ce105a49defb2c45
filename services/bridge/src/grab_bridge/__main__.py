import uvicorn

from .app import app
from .log import log_event


def main() -> None:
    settings = app.state.settings
    log_event("bridge_starting", host=settings.host, port=settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
