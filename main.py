import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
import uvicorn

from config import Settings, get_settings
from errors import register_error_handlers
from routers import all_routers

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )


def create_app(settings: Settings = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(title=settings.APP_NAME)
    register_error_handlers(app)

    for router in all_routers:
        app.include_router(router)

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return settings.APP_NAME

    # Last-resort error middleware
    @app.middleware("http")
    async def error_middleware(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return JSONResponse(status_code=500, content={"error": "Internal server error"})

    return app


app = create_app()

if __name__ == "__main__":
    port = get_settings().PORT
    uvicorn.run("main:app", host="0.0.0.0", port=port, reload=True)
