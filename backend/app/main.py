from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from sqlmodel import Session
from app.api import routers
from app.logging_config import logger
from app.config import config
from app.exceptions import TestCasesException, exception_to_response
from app.models import init_db, engine
from app.services import PlatformService


def seed_default_platforms(bind=None):
    """既定のプラットフォームを投入する"""
    with Session(bind or engine) as session:
        return PlatformService(session).seed_defaults(config.get("platforms", "DEFAULTS"))


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    if config.get("platforms", "SEED_DEFAULTS"):
        seed_default_platforms()
    logger.info(f"{config.get('app', 'NAME')} started")
    yield


app = FastAPI(title=config.get("app", "NAME"), lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get("app", "CORS_ORIGINS"),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for router in routers:
    app.include_router(router)


@app.exception_handler(TestCasesException)
async def handle_app_exception(request: Request, exc: TestCasesException):
    logger.warning(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=exc.status_code, content=exception_to_response(exc))


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", []) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg", "Invalid request")
    else:
        message = "Invalid request"
    logger.warning(f"{request.method} {request.url.path} rejected: {message}")
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception):
    logger.error(f"Unexpected error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.get("/health")
def health():
    return {"status": "ok"}
