"""
User endpoints.

Each route calls exactly one ``UserStore`` operation and translates its
outcome: a missing user is a 404, a taken email a 400.  Request bodies
are validated by the ``UserCreate``/``UserUpdate`` schemas before the
store sees them.  Handlers are plain functions, so FastAPI runs them in
its threadpool and the store lock is never taken on the event loop.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from catalog_api.app.api.deps import get_user_store
from catalog_api.app.core.errors import unwrap
from catalog_api.app.schemas.common import ErrorResponse
from catalog_api.app.schemas.user import User, UserCreate, UserRole, UserUpdate
from catalog_api.app.services.user_service import USER_NOT_FOUND, UserStore

router = APIRouter()

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "User not found"}}
_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid input data"}}


@router.get("/", response_model=List[User], summary="Get all users")
def list_users(
    role: Optional[UserRole] = Query(None, description="Only return users with this role"),
    store: UserStore = Depends(get_user_store),
) -> List[User]:
    """Return all users in creation order, optionally filtered by role."""
    if role:
        return store.find_by_role(role)
    return store.find_all()


@router.get("/active", response_model=List[User], summary="Get active users")
def list_active_users(store: UserStore = Depends(get_user_store)) -> List[User]:
    return store.find_active()


@router.get("/{user_id}", response_model=User, summary="Get user by ID", responses=_NOT_FOUND)
def get_user(user_id: str, store: UserStore = Depends(get_user_store)) -> User:
    user = store.find_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return user


@router.post(
    "/",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
    responses=_BAD_REQUEST,
)
def create_user(payload: UserCreate, store: UserStore = Depends(get_user_store)) -> User:
    """Create an active user.  The email must not belong to another user."""
    return unwrap(store.create(payload))


@router.put("/{user_id}", response_model=User, summary="Update a user", responses={**_NOT_FOUND, **_BAD_REQUEST})
@router.patch("/{user_id}", response_model=User, summary="Partially update a user", responses={**_NOT_FOUND, **_BAD_REQUEST})
def update_user(user_id: str, payload: UserUpdate, store: UserStore = Depends(get_user_store)) -> User:
    """Apply the provided fields to a user; omitted fields keep their values."""
    return unwrap(store.update(user_id, payload))


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
    responses=_NOT_FOUND,
)
def delete_user(user_id: str, store: UserStore = Depends(get_user_store)) -> None:
    unwrap(store.delete(user_id))
    return None
