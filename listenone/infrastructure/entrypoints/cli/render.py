from rich.console import Console
from rich.table import Table

from listenone.domain.entities.music import Album
from listenone.domain.entities.music import Artist
from listenone.domain.entities.music import Lyric
from listenone.domain.entities.music import PagedResult
from listenone.domain.entities.music import Playlist
from listenone.domain.entities.music import Track


def _tracks_table(title: str, tracks: list[Track]) -> Table:
    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("ID", overflow="fold")
    table.add_column("Title", overflow="fold")
    table.add_column("Artist", overflow="fold")
    table.add_column("Album", overflow="fold")

    for position, track in enumerate(tracks, start=1):
        table.add_row(str(position), track.id, track.title, track.artist, track.album)

    return table


def render_playlists_page(page: PagedResult[Playlist], title: str = "Playlists") -> None:
    console = Console()

    table = Table(title=title)
    table.add_column("ID", overflow="fold")
    table.add_column("Title", overflow="fold")
    for playlist in page.items:
        table.add_row(playlist.id, playlist.title)

    console.print(table)
    if page.page:
        console.print(f"Page {page.page} ({page.page_size} per page), total: {page.total}")
    else:
        console.print(f"{len(page.items)} playlists")


def render_playlist(playlist: Playlist) -> None:
    console = Console()

    console.print(_tracks_table(playlist.title, playlist.tracks))
    console.print(f"Source: {playlist.info.source_url}", soft_wrap=True)

    if not playlist.is_complete:
        console.print(
            f"{len(playlist.failed_track_ids)} tracks could not be fetched: {', '.join(playlist.failed_track_ids)}",
            style="yellow",
            soft_wrap=True,
        )


def render_album(album: Album) -> None:
    console = Console()

    console.print(_tracks_table(f"{album.title} - {album.artist}", album.tracks))
    console.print(f"Source: {album.source_url}", soft_wrap=True)


def render_artist(artist: Artist) -> None:
    console = Console()

    console.print(_tracks_table(artist.name, artist.tracks))
    console.print(f"Source: {artist.source_url}", soft_wrap=True)


def render_lyric(lyric: Lyric) -> None:
    console = Console()

    # Raw LRC text, printed without markup rendering.
    console.print(lyric.lyric, markup=False, highlight=False, soft_wrap=True)
    if lyric.translation:
        console.rule("Translation")
        console.print(lyric.translation, markup=False, highlight=False, soft_wrap=True)
