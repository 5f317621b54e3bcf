## Main application entry point
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from app.settings import settings
from app.db.base import Base
from app.db.session import engine
from app.agents.llm.base import LLMError, LLMRateLimited
from app.agents.workflow import BadLlmJson
from app.roadmaps.routes import router as roadmaps_router

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/", response_class=PlainTextResponse)
def home():
    return "Roadmap backend is running"

@app.exception_handler(BadLlmJson)
async def bad_llm_json_handler(request: Request, exc: BadLlmJson):
    return JSONResponse(
        status_code=500,
        content={"error": "BAD_LLM_JSON", "message": "AI returned unrecoverable malformed data"},
    )

@app.exception_handler(LLMRateLimited)
async def rate_limited_handler(request: Request, exc: LLMRateLimited):
    logger.warning("LLM rate limit hit: %s", exc)
    return JSONResponse(
        status_code=429,
        content={"error": "RATE_LIMIT", "message": "AI daily limit reached. Please wait and try again."},
    )

@app.exception_handler(LLMError)
async def llm_error_handler(request: Request, exc: LLMError):
    logger.error("Roadmap error: %s", exc)
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": "Failed to generate roadmap"},
    )

@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": "Failed to generate roadmap"},
    )

app.include_router(roadmaps_router)
