# app/user/routes.py
from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from loguru import logger

from app.core.dependencies import get_user_service
from app.core.schemas import MAX_DB_ID, MessageOut
from app.user.schemas import UserCreate, UserUpdate, UserWithTickets
from app.user.services import UserService

router = APIRouter(prefix="/users", tags=["Users"])

UserId = Annotated[int, Path(le=MAX_DB_ID)]


@router.post("", response_model=UserWithTickets, status_code=status.HTTP_201_CREATED)
def create(user: UserCreate, service: UserService = Depends(get_user_service)):
    logger.info(f"Request to create user {user.email}")
    return service.create(user)


@router.get("", response_model=list[UserWithTickets])
def list_all(service: UserService = Depends(get_user_service)):
    return service.list_all(include_tickets=True)


@router.get("/{user_id}", response_model=UserWithTickets)
def get(user_id: UserId, service: UserService = Depends(get_user_service)):
    return service.get_by_id(user_id, include_tickets=True)


@router.put("/{user_id}", response_model=UserWithTickets)
def update(user_id: UserId, user: UserUpdate, service: UserService = Depends(get_user_service)):
    logger.info(f"Request to update user {user_id}")
    return service.update(user_id, user)


@router.delete("/{user_id}", response_model=MessageOut)
def delete(user_id: UserId, service: UserService = Depends(get_user_service)):
    logger.info(f"Request to delete user {user_id}")
    service.remove(user_id)
    return {"message": "User deleted", "id": user_id}
