"""Album router: table listing joined with artist names, lookup and CRUD."""

from fastapi import APIRouter, Query, Response, status

from catalog_admin.config import get_settings
from catalog_admin.core.exceptions import NotFoundException, RecordNotFoundError
from catalog_admin.dependencies import CatalogDep, CatalogServiceDep
from catalog_admin.schemas.album import Album, AlbumCreate, AlbumRow, AlbumUpdate
from catalog_admin.schemas.common import CreatedResponse

router = APIRouter()


@router.get(
    "",
    response_model=list[AlbumRow],
    summary="List albums",
)
async def list_albums(
    service: CatalogServiceDep,
    q: str | None = Query(None, description="Filter on album title or artist name"),
):
    """List albums with the artist name resolved ("Unknown Artist" if missing)."""
    return await service.search_albums(q)


@router.get(
    "/lookup",
    response_model=list[Album],
    summary="Prefix lookup on album titles",
)
async def lookup_albums(
    catalog: CatalogDep,
    prefix: str = Query(..., min_length=1),
):
    return await catalog.albums.search_prefix(prefix, limit=get_settings().search_prefix_limit)


@router.get(
    "/{album_id}",
    response_model=Album,
    summary="Get an album",
)
async def get_album(album_id: str, catalog: CatalogDep):
    album = await catalog.albums.get(album_id)
    if not album:
        raise NotFoundException("Album not found")
    return album


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an album",
)
async def create_album(album_data: AlbumCreate, catalog: CatalogDep):
    """
    Create an album.

    The artist and track ids are stored as given; songs are not updated
    to point back at the album.
    """
    album_id = await catalog.albums.create(album_data)
    return CreatedResponse(id=album_id)


@router.patch(
    "/{album_id}",
    response_model=Album,
    summary="Update an album",
)
async def update_album(album_id: str, update_data: AlbumUpdate, catalog: CatalogDep):
    try:
        await catalog.albums.update(album_id, update_data)
    except RecordNotFoundError:
        raise NotFoundException("Album not found")
    album = await catalog.albums.get(album_id)
    if not album:
        raise NotFoundException("Album not found")
    return album


@router.delete(
    "/{album_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an album",
)
async def delete_album(album_id: str, catalog: CatalogDep):
    await catalog.albums.delete(album_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
