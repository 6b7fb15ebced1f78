import re
from collections.abc import Callable
from dataclasses import dataclass
from urllib.parse import parse_qs
from urllib.parse import urlsplit

from bs4 import BeautifulSoup
from bs4 import Tag

from listenone.domain.exceptions import ProviderDecodeError

type IdExtractor = Callable[[str], str]


@dataclass(frozen=True, kw_only=True)
class ListingRecord:
    id: str
    title: str
    cover_img_url: str


def query_param_id(name: str) -> IdExtractor:
    """Builds an extractor reading a numeric id from a query parameter, e.g. `/playlist?id=123`."""

    def _extract(href: str) -> str:
        values = parse_qs(urlsplit(href).query).get(name)
        if not values or not values[0].isdigit():
            raise ProviderDecodeError(f"No numeric '{name}' query parameter in link: {href}")
        return values[0]

    return _extract


def path_segment_id(pattern: str) -> IdExtractor:
    """Builds an extractor reading a numeric id from the link path.

    The pattern must define a named group `id`, e.g. `/special/single/(?P<id>\\d+)\\.html`.
    """
    regex = re.compile(pattern)

    def _extract(href: str) -> str:
        match = regex.search(urlsplit(href).path)
        if match is None or not match.group("id").isdigit():
            raise ProviderDecodeError(f"No numeric id matching {pattern!r} in link: {href}")
        return match.group("id")

    return _extract


class HtmlListingScraper:
    """Extracts listing records from a rendered HTML page.

    The structural contract is fixed: one container element, whose direct
    `<li>` children each hold an `<img>` (the cover) and a `<div>` wrapping an
    `<a>` (title attribute and link to the item). Any missing piece breaks the
    whole scraping, records are never partially filled.
    """

    def __init__(
        self,
        container_selector: str,
        id_extractor: IdExtractor,
        image_size_token: str | None = None,
        image_target_size: str | None = None,
    ) -> None:
        self.container_selector = container_selector
        self.id_extractor = id_extractor
        self.image_size_token = image_size_token
        self.image_target_size = image_target_size

    def scrape(self, html: str) -> list[ListingRecord]:
        document = BeautifulSoup(html, "html.parser")

        container = document.select_one(self.container_selector)
        if container is None:
            raise ProviderDecodeError(f"Container '{self.container_selector}' not found in document")

        return [self._parse_item(item) for item in container.find_all("li", recursive=False)]

    def _parse_item(self, item: Tag) -> ListingRecord:
        image = item.find("img")
        cover_img_url = self._required_attribute(image, "src")
        if self.image_size_token and self.image_target_size:
            cover_img_url = cover_img_url.replace(self.image_size_token, self.image_target_size)

        title_container = item.find("div")
        anchor = title_container.find("a") if isinstance(title_container, Tag) else None
        title = self._required_attribute(anchor, "title")
        href = self._required_attribute(anchor, "href")

        return ListingRecord(
            id=self.id_extractor(href),
            title=title,
            cover_img_url=cover_img_url,
        )

    @staticmethod
    def _required_attribute(element: object, name: str) -> str:
        if not isinstance(element, Tag):
            raise ProviderDecodeError(f"Missing element holding the '{name}' attribute")

        value = element.get(name)
        if not isinstance(value, str):
            raise ProviderDecodeError(f"Missing '{name}' attribute on <{element.name}>")

        return value
