import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from openai import AsyncOpenAI
from supabase import acreate_client

from .config import Settings
from .errors import SearchError, search_error_handler, validation_error_handler
from .models import HealthResponse
from .routers import search

STATIC_DIR = Path(__file__).parent / "static"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Raises MissingSettingError, aborting startup, if a required variable is unset.
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app.state.embedding_model = settings.embedding_model
    app.state.openai = AsyncOpenAI(api_key=settings.openai_api_key)
    app.state.supabase = await acreate_client(
        settings.supabase_url, settings.supabase_anon_key
    )
    logger.info("Search clients ready (embedding model %s)", settings.embedding_model)
    try:
        yield
    finally:
        await app.state.openai.close()


app = FastAPI(
    title="Post Search",
    description="Semantic search over posts: ask a question, get the closest posts",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_exception_handler(SearchError, search_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)

app.include_router(search.router)
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.get("/health", tags=["health"], response_model=HealthResponse)
async def healthcheck():
    return {"status": "ok"}


@app.get("/", include_in_schema=False)
async def root():
    return FileResponse(STATIC_DIR / "index.html")
