"""Artist router: table listing with derived counts, lookup and CRUD."""

from fastapi import APIRouter, Query, Response, status

from catalog_admin.config import get_settings
from catalog_admin.core.exceptions import NotFoundException, RecordNotFoundError
from catalog_admin.dependencies import CatalogDep, CatalogServiceDep
from catalog_admin.schemas.artist import Artist, ArtistCreate, ArtistRow, ArtistUpdate
from catalog_admin.schemas.common import CreatedResponse

router = APIRouter()


@router.get(
    "",
    response_model=list[ArtistRow],
    summary="List artists",
)
async def list_artists(
    service: CatalogServiceDep,
    q: str | None = Query(None, description="Case-insensitive filter on the artist name"),
):
    """
    List artists for the admin table.

    - **songs_count** / **albums_count** are recomputed on every call
    - **followers_count** is the stored love counter
    """
    return await service.search_artists(q)


@router.get(
    "/lookup",
    response_model=list[Artist],
    summary="Prefix lookup on artist names",
)
async def lookup_artists(
    catalog: CatalogDep,
    prefix: str = Query(..., min_length=1),
):
    """Server-side, case-sensitive prefix match on the artist name."""
    return await catalog.artists.search_prefix(prefix, limit=get_settings().search_prefix_limit)


@router.get(
    "/{artist_id}",
    response_model=Artist,
    summary="Get an artist",
)
async def get_artist(artist_id: str, catalog: CatalogDep):
    artist = await catalog.artists.get(artist_id)
    if not artist:
        raise NotFoundException("Artist not found")
    return artist


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an artist",
)
async def create_artist(artist_data: ArtistCreate, catalog: CatalogDep):
    artist_id = await catalog.artists.create(artist_data)
    return CreatedResponse(id=artist_id)


@router.patch(
    "/{artist_id}",
    response_model=Artist,
    summary="Update an artist",
)
async def update_artist(artist_id: str, update_data: ArtistUpdate, catalog: CatalogDep):
    """Only the fields present in the body are changed."""
    try:
        await catalog.artists.update(artist_id, update_data)
    except RecordNotFoundError:
        raise NotFoundException("Artist not found")
    artist = await catalog.artists.get(artist_id)
    if not artist:
        raise NotFoundException("Artist not found")
    return artist


@router.delete(
    "/{artist_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an artist",
)
async def delete_artist(artist_id: str, catalog: CatalogDep):
    """
    Delete an artist.

    Songs and albums that reference the artist are kept as they are; they
    show up as "Unknown Artist" and in the integrity report.
    """
    await catalog.artists.delete(artist_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
