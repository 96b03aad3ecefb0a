from fastapi import APIRouter, Query, Response, status

from catalog_admin.config import get_settings
from catalog_admin.core.exceptions import (
    ConflictException,
    NotFoundException,
    RecordNotFoundError,
)
from catalog_admin.dependencies import CatalogDep, CatalogServiceDep
from catalog_admin.repositories.catalog import Catalog
from catalog_admin.schemas.common import CreatedResponse
from catalog_admin.schemas.user import User, UserCreate, UserUpdate

router = APIRouter()


async def ensure_email_available(catalog: Catalog, email: str, exclude_id: str | None = None) -> None:
    """Raise 409 if another user already has this email (case-insensitive)."""
    wanted = email.lower()
    for user in await catalog.users.list_all():
        if user.id != exclude_id and user.email.lower() == wanted:
            raise ConflictException("Email already registered")


@router.get(
    "",
    response_model=list[User],
    summary="List users",
)
async def list_users(
    service: CatalogServiceDep,
    q: str | None = Query(None, description="Filter on display name or email"),
):
    return await service.search_users(q)


@router.get(
    "/lookup",
    response_model=list[User],
    summary="Prefix lookup on display names",
)
async def lookup_users(
    catalog: CatalogDep,
    prefix: str = Query(..., min_length=1),
):
    return await catalog.users.search_prefix(prefix, limit=get_settings().search_prefix_limit)


@router.get(
    "/{user_id}",
    response_model=User,
    summary="Get a user",
)
async def get_user(user_id: str, catalog: CatalogDep):
    user = await catalog.users.get(user_id)
    if not user:
        raise NotFoundException("User not found")
    return user


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
)
async def create_user(user_data: UserCreate, catalog: CatalogDep):
    """
    Create a user.

    - **email**: must be unique
    - **role**: `admin` or `user`
    """
    await ensure_email_available(catalog, user_data.email)
    user_id = await catalog.users.create(user_data)
    return CreatedResponse(id=user_id)


@router.patch(
    "/{user_id}",
    response_model=User,
    summary="Update a user",
)
async def update_user(user_id: str, update_data: UserUpdate, catalog: CatalogDep):
    """Only the fields present in the body are changed; `updated_at` is refreshed."""
    if update_data.email:
        await ensure_email_available(catalog, update_data.email, exclude_id=user_id)
    try:
        await catalog.users.update(user_id, update_data)
    except RecordNotFoundError:
        raise NotFoundException("User not found")
    user = await catalog.users.get(user_id)
    if not user:
        raise NotFoundException("User not found")
    return user


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
)
async def delete_user(user_id: str, catalog: CatalogDep):
    await catalog.users.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
