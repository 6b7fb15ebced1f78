from typing import Final

from listenone.domain.types import EntityKind
from listenone.domain.types import MusicProvider

PROVIDER_TAGS: Final[dict[MusicProvider, str]] = {
    MusicProvider.KUGOU: "kg",
    MusicProvider.NETEASE: "ne",
}

DEFAULT_PROVIDER_TAG: Final[str] = PROVIDER_TAGS[MusicProvider.KUGOU]


def provider_tag(provider: MusicProvider | str) -> str:
    """Returns the short tag of a provider.

    Unknown providers fall back to the Kugou tag, so their ids may collide
    with genuine Kugou ids.
    """
    try:
        return PROVIDER_TAGS[MusicProvider(provider)]
    except ValueError:
        return DEFAULT_PROVIDER_TAG


def unified_id(provider: MusicProvider | str, kind: EntityKind, native_id: str | int) -> str:
    """Maps a provider native id into the global id space, e.g. `kgtrack_<hash>`."""
    return f"{provider_tag(provider)}{kind}_{native_id}"
