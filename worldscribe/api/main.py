"""
FastAPI app assembly: logging, middleware, error mapping and router wiring.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from worldscribe.api.articles import router as articles_router
from worldscribe.api.categories import router as categories_router
from worldscribe.api.connections import router as connections_router
from worldscribe.api.snippets import router as snippets_router
from worldscribe.api.worlds import router as worlds_router
from worldscribe.errors import WorldScribeError
from worldscribe.utils.settings import get_settings

# Configure logging
settings = get_settings()
LOG_LEVEL = getattr(logging, settings.log_level, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s worlds_folder=%s", settings.log_level, settings.worlds_folder)

app = FastAPI(
    title="WorldScribe Content Server",
    description="API for managing WorldScribe Worlds: categories, articles, connections and snippets.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(WorldScribeError)
async def worldscribe_error_handler(request: Request, exc: WorldScribeError):
    if exc.status_code >= 500:
        logger.error("request_failed: path=%s error=%s", request.url.path, exc)
    return JSONResponse({"detail": str(exc)}, status_code=exc.status_code)


app.include_router(worlds_router)
app.include_router(categories_router)
app.include_router(articles_router)
app.include_router(connections_router)
app.include_router(snippets_router)


@app.get("/")
def read_root():
    return {"message": "WorldScribe server is running"}


@app.get("/health")
def health_check():
    return {"status": "ok", "service": "worldscribe"}
