import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv

# Load environment variables before any integration reads them
load_dotenv()

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from truthscan.api import analysis, reports, system
from truthscan.core.errors import InputValidationError
from truthscan.integrations import redis_client
from truthscan.integrations.gemini import client as gemini_client


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    redis_client.initialize()
    gemini_client.initialize()
    logger.info(
        f"[STARTUP] TruthScan ready (gemini={'on' if gemini_client.is_available() else 'off'})"
    )
    yield
    logger.info("[SHUTDOWN] TruthScan stopped")


app = FastAPI(title="TruthScan Content Credibility API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InputValidationError)
async def input_validation_handler(request: Request, exc: InputValidationError):
    logger.info(f"[ERROR HANDLER] 400 for {request.url.path}: {exc.message}")
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.info(f"[ERROR HANDLER] Returning {exc.status_code} to client: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"[ERROR HANDLER] Analysis error on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": "Failed to analyze content"})


app.include_router(system.router)
app.include_router(analysis.router)
app.include_router(reports.router)
