from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from ..schemas.common import Message
from ..schemas.user import UserCreated, UserOut
from ..services.users import UserService, get_user_service

router = APIRouter()


@router.get("", response_model=List[UserOut])
def get_users(
    q: Optional[str] = Query(None, description="Substring of the user name"),
    service: UserService = Depends(get_user_service),
):
    return service.list_users(q)


@router.post("", response_model=UserCreated, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: Dict[str, Any] = Body(default={}),
    service: UserService = Depends(get_user_service),
):
    return service.create_user(payload)


@router.delete("/{user_id}", response_model=Message)
def delete_user(user_id: str, service: UserService = Depends(get_user_service)):
    return service.delete_user(user_id)
