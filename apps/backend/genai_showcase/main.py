import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from genai_showcase.core.config import settings
from genai_showcase.core.errors import UpstreamError, ValidationError
from genai_showcase.providers.registry import build_registry
from genai_showcase.routers import analysis, frontend
from genai_showcase.routers.frontend import STATIC_DIR
from genai_showcase.services.dispatcher import Dispatcher


def configure_logging(level: str | None = None) -> None:
    resolved = (level or settings.log_level or "INFO").upper()
    numeric_level = getattr(logging, resolved, None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    # basicConfig is a no-op once the server has installed root handlers
    logging.getLogger().setLevel(numeric_level)


app = FastAPI(
    title="Google GenAI Showcase API",
    version="1.0.0",
    description="A simple API for text, image and PDF analysis with Google GenAI, OpenAI and DeepSeek",
    docs_url="/api-docs",
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.on_event("startup")
async def on_startup():
    configure_logging()
    registry = build_registry(settings)
    app.state.dispatcher = Dispatcher(registry)
    logging.info(f"Providers registered: {[p.value for p in registry.providers()]} (default: {registry.default.value})")


@app.exception_handler(ValidationError)
async def handle_validation_error(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    logging.warning(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request"})


@app.exception_handler(UpstreamError)
async def handle_upstream_error(request: Request, exc: UpstreamError):
    # Cause already logged by the dispatcher; never echo it to the caller
    logging.error(f"Error processing {request.url.path}: {exc.message}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


app.include_router(analysis.router)
app.include_router(frontend.router)
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
