from fastapi import APIRouter, Query, Response, status

from catalog_admin.config import get_settings
from catalog_admin.core.exceptions import NotFoundException, RecordNotFoundError
from catalog_admin.dependencies import CatalogDep, CatalogServiceDep
from catalog_admin.schemas.common import CreatedResponse
from catalog_admin.schemas.song import Song, SongCreate, SongRow, SongUpdate

router = APIRouter()


@router.get(
    "",
    response_model=list[SongRow],
    summary="List songs",
)
async def list_songs(
    service: CatalogServiceDep,
    q: str | None = Query(None, description="Case-insensitive filter on the song title"),
):
    """
    List songs with artist and album names.

    Only the first artist of a song is resolved for display.
    """
    return await service.search_songs(q)


@router.get(
    "/lookup",
    response_model=list[Song],
    summary="Prefix lookup on song titles",
)
async def lookup_songs(
    catalog: CatalogDep,
    prefix: str = Query(..., min_length=1),
):
    return await catalog.songs.search_prefix(prefix, limit=get_settings().search_prefix_limit)


@router.get(
    "/{song_id}",
    response_model=Song,
    summary="Get a song",
)
async def get_song(song_id: str, catalog: CatalogDep):
    song = await catalog.songs.get(song_id)
    if not song:
        raise NotFoundException("Song not found")
    return song


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a song",
)
async def create_song(song_data: SongCreate, catalog: CatalogDep):
    song_id = await catalog.songs.create(song_data)
    return CreatedResponse(id=song_id)


@router.patch(
    "/{song_id}",
    response_model=Song,
    summary="Update a song",
)
async def update_song(song_id: str, update_data: SongUpdate, catalog: CatalogDep):
    try:
        await catalog.songs.update(song_id, update_data)
    except RecordNotFoundError:
        raise NotFoundException("Song not found")
    song = await catalog.songs.get(song_id)
    if not song:
        raise NotFoundException("Song not found")
    return song


@router.delete(
    "/{song_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a song",
)
async def delete_song(song_id: str, catalog: CatalogDep):
    """Delete a song. Album track lists still holding its id are not touched."""
    await catalog.songs.delete(song_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
