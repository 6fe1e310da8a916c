from fastapi import FastAPI, Request
from fastapi.responses import ORJSONResponse
from gamerelease.core.config import get_settings, mask
from gamerelease.core.errors import GameReleaseError
from gamerelease.api.health import router as health_router
from gamerelease.api.alexa import router as alexa_router
from gamerelease.services.logger import configure_logging, get_logger

def create_app() -> FastAPI:
    # fails fast when IGDB_KEY is missing
    s = get_settings()
    configure_logging(s.LOG_LEVEL)
    log = get_logger(__name__)
    app = FastAPI(title=s.APP_NAME, version=s.APP_VERSION, default_response_class=ORJSONResponse)
    app.include_router(health_router)
    app.include_router(alexa_router)

    @app.exception_handler(GameReleaseError)
    def _game_release_error(request: Request, exc: GameReleaseError):
        log.error(f"{request.url.path} failed: {exc.code} {exc.message}")
        return ORJSONResponse(status_code=500, content=exc.to_dict())

    log.info(f"{s.APP_NAME} {s.APP_VERSION} ready, catalog={s.IGDB_API_URL} key={mask(s.IGDB_KEY)}")
    return app

app = create_app()
