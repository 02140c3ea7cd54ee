from contextlib import asynccontextmanager
import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from grawlix.api.text import router as text_router
from grawlix.core.config import get_settings
from grawlix.core.logging import setup_logging
from grawlix.core.version import get_full_version_info, get_version_string
from grawlix.core.vocabulary import get_base_vocabulary

settings = get_settings()
setup_logging(level=settings.log_level, access_log=settings.access_log)
logger = logging.getLogger(__name__)      # module-specific logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application-wide startup / shutdown lifecycle hook.

    * Loads the base vocabulary once so the first request doesn't pay for it.
    """
    try:
        vocabulary = get_base_vocabulary()
        logger.info("✅ Base vocabulary ready (%d terms).", len(vocabulary))
    except Exception:
        logger.exception("❌ Error loading base vocabulary during startup")
        raise

    # ───────────── application runs ─────────────
    yield

    logger.info("Shutting down grawlix service")


app = FastAPI(title="Grawlix", version=get_version_string(), lifespan=lifespan)

# Build CORS origins list
allow_origins = ["http://localhost:3000"]
if settings.frontend_url:
    allow_origins.append(settings.frontend_url)

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(text_router)


@app.get("/", response_class=PlainTextResponse)
async def index() -> str:
    return "Hello world!"


@app.get("/health", tags=["utils"])
async def health() -> dict[str, str]:
    """CI smoke-test endpoint."""
    return {"status": "ok"}


@app.get("/version", tags=["utils"])
async def version() -> dict:
    return get_full_version_info()


@app.get("/debug/settings", tags=["utils"])
async def debug_settings() -> dict:
    """Debug endpoint to check current settings."""
    return {
        "wordlist_path": str(settings.wordlist_path) if settings.wordlist_path else None,
        "placeholder_content": settings.placeholder_content,
        "mask_char": settings.mask_char,
        "testing": settings.testing,
        "env_frontend_url": os.getenv("FRONTEND_URL"),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
