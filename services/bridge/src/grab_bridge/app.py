from dotenv import load_dotenv

# Pick up a .env from the working directory before settings are read
load_dotenv()

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .formatting import selection_summary
from .log import configure_logging
from .routers import selection
from .selection_store import SelectionStore
from .settings import Settings, load_settings

SERVER_NAME = "react-grab-bridge"


async def _error_response(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    detail = exc.detail
    if detail == "Not Found":
        detail = "Not found"
    return JSONResponse(status_code=exc.status_code, content={"error": detail})


def create_app(settings: Optional[Settings] = None, store: Optional[SelectionStore] = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="React Grab Bridge", version="1.0.0")
    app.state.settings = settings
    app.state.selection_store = store if store is not None else SelectionStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allow_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.add_exception_handler(StarletteHTTPException, _error_response)

    app.include_router(selection.router)

    @app.get("/")
    @app.get("/health")
    def health():
        return {
            "status": "ok",
            "server": SERVER_NAME,
            "lastSelection": selection_summary(app.state.selection_store.latest()),
        }

    return app


app = create_app()
