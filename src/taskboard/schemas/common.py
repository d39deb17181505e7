from typing import List
from pydantic import BaseModel
from .user import UserOut


class Message(BaseModel):
    message: str


class Pong(BaseModel):
    message: str
    result: List[UserOut]
