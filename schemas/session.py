from pydantic import BaseModel, Field
from constants import DEFAULT_EXPIRE_MINUTES


class EnterSessionRequest(BaseModel):
    schedule_id: int
    user_id: int
    user_name: str = Field(..., min_length=1)
    room_name: str = Field(..., min_length=1)
    # minutes until the room's member set expires
    time: int = Field(DEFAULT_EXPIRE_MINUTES, gt=0)

class RemoveSessionRequest(BaseModel):
    schedule_id: int
    user_id: int
    room_name: str = Field(..., min_length=1)

class SessionResponse(BaseModel):
    code: str
    msg: str
    data: str = ""
