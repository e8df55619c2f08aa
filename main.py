from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
import logging

from config import get_settings
from core.wheel_registry import WheelRegistry
from core.wheel_service import WheelService
from services.naming_service import generate_wheel_id
from api import wheels

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(levelname)s - [%(name)s] - %(message)s'
)
logger = logging.getLogger(__name__)


def build_wheel_service() -> WheelService:
    registry = WheelRegistry(
        generate_id=lambda: generate_wheel_id(
            settings.wheel_id_length, settings.wheel_id_alphabet
        ),
        max_id_attempts=settings.wheel_id_max_attempts
    )
    return WheelService(registry, settings=settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: 建立空的 registry（只存在記憶體，重啟即清空）
    app.state.wheel_service = build_wheel_service()
    logger.info("Wheel registry initialized")
    yield
    # Shutdown: 不做持久化，wheel 隨 process 結束


app = FastAPI(
    title="Wheel API",
    description="Backend API for shareable weighted prize wheels",
    version="1.0.0",
    lifespan=lifespan
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(wheels.router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    # 無法解析或完全沒有 body，都視為 JSON 格式錯誤
    if any(
        error.get("type") == "json_invalid"
        or (error.get("type") == "missing" and tuple(error.get("loc", ())) == ("body",))
        for error in errors
    ):
        return JSONResponse(status_code=400, content={"error": "Invalid JSON"})

    message = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
        for error in errors
    )
    return JSONResponse(status_code=400, content={"error": message or "Invalid request"})


@app.get("/")
def root():
    return {"message": "Wheel API", "status": "ok"}


@app.get("/health")
def health():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
