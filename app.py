from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from http import HTTPStatus
from redis.exceptions import RedisError
from routers.session import session_router
from backend import RedisBackend, get_redis_backend
from constants import LOG_LEVEL, LOG_FILE
from exceptions import SessionError, NotFoundError, ForbiddenError, StoreError, SerializationError
from schemas.session import SessionResponse
from session_service import status_token
from logging_config import get_logger, setup_logging

# Setup logging
setup_logging(log_level=LOG_LEVEL, log_file=LOG_FILE)
logger = get_logger(__name__)

app = FastAPI(title="Mentoring live sessions")

# Configure CORS to allow all origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(session_router)

logger.info("FastAPI application initialized")

ERROR_STATUSES = {
    NotFoundError: HTTPStatus.NOT_FOUND,
    ForbiddenError: HTTPStatus.FORBIDDEN,
    StoreError: HTTPStatus.SERVICE_UNAVAILABLE,
    SerializationError: HTTPStatus.INTERNAL_SERVER_ERROR,
}


@app.exception_handler(SessionError)
async def session_error_handler(request: Request, exc: SessionError):
    status = ERROR_STATUSES.get(type(exc), HTTPStatus.INTERNAL_SERVER_ERROR)
    logger.warning(f"{request.method} {request.url.path} failed with {status.value}: {exc}")
    body = SessionResponse(code=status_token(status), msg=str(exc), data="")
    return JSONResponse(status_code=status.value, content=body.model_dump())


@app.get("/health")
def health(backend: RedisBackend = Depends(get_redis_backend)):
    try:
        backend.ping()
    except RedisError as e:
        logger.error(f"Health check failed, Redis unreachable: {e}")
        return JSONResponse(status_code=HTTPStatus.SERVICE_UNAVAILABLE.value, content={"status": "unhealthy"})
    return {"status": "ok"}
