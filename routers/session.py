from fastapi import APIRouter, Depends, Request
from schemas.session import EnterSessionRequest, RemoveSessionRequest, SessionResponse
from session_service import SessionService, get_session_service
from logging_config import get_logger

logger = get_logger(__name__)

session_router = APIRouter(prefix="/session", tags=["session"])


def client_host(request: Request) -> str:
    return request.client.host if request.client else "unknown"


@session_router.post("/enter", response_model=SessionResponse)
def enter_session(body: EnterSessionRequest, request: Request, service: SessionService = Depends(get_session_service)):
    # POST /session/enter Body: { "schedule_id": 1, "user_id": 20, "user_name": "bob", "room_name": "r1", "time": 5 }
    # Response 200: { "code": "200 OK", "msg": "...", "data": "[bob]" }
    logger.info(f"Enter request for room {body.room_name} from {client_host(request)}, user: {body.user_name}")
    return service.enter(body.schedule_id, body.user_id, body.user_name, body.room_name, body.time)


@session_router.get("/list", response_model=SessionResponse)
def list_sessions(request: Request, service: SessionService = Depends(get_session_service)):
    # Response 200: { "code": "200 OK", "msg": "...", "data": "{\"r1\": [\"bob\"]}" }
    logger.info(f"List sessions request from {client_host(request)}")
    return service.list()


@session_router.post("/remove", response_model=SessionResponse)
def remove_session(body: RemoveSessionRequest, request: Request, service: SessionService = Depends(get_session_service)):
    # Only the schedule's mentor may remove; data is the number of keys deleted
    logger.info(f"Remove request for room {body.room_name} from {client_host(request)}, user id: {body.user_id}")
    return service.remove(body.schedule_id, body.user_id, body.room_name)
