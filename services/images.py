"""Avatar fetching with an explicit visual state.

Every pending avatar on a screen is requested at once on an
``httpx.AsyncClient``; each result is reported as soon as it arrives, so one
slow image never holds up the others. Fetch failures never raise: they become
``Failed`` and the card shows the error glyph. ``ImageStore`` keeps resolved
states for the session, so a failed avatar is not retried until the screen is
rebuilt (``forget_failures``).
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

import httpx

from domain.constants import IMAGE_MAX_CONCURRENCY, IMAGE_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

USER_AGENT = "pet-adoption-demo/0.1"


class ImageFetchError(Exception):
    """Raised when the endpoint answers with something that is not an image."""


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Loaded:
    data: bytes
    mime_type: str = 'image/png'


@dataclass(frozen=True)
class Failed:
    reason: str


ImageState = Union[Loading, Loaded, Failed]


class ImageStore:
    """Resolved image states keyed by URL. Unknown URLs read as ``Loading``."""

    def __init__(self):
        self._states: Dict[str, ImageState] = {}

    def get(self, url: str) -> ImageState:
        return self._states.get(url, Loading())

    def put(self, url: str, state: ImageState):
        self._states[url] = state

    def pending(self, urls: Iterable[str]) -> List[str]:
        return [u for u in dict.fromkeys(urls) if u not in self._states]

    def forget_failures(self):
        self._states = {u: s for u, s in self._states.items()
                        if not isinstance(s, Failed)}


def build_async_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=httpx.Timeout(IMAGE_TIMEOUT_SECONDS),
        follow_redirects=True,
        headers={"User-Agent": USER_AGENT, "Accept": "image/*"},
        limits=httpx.Limits(max_connections=IMAGE_MAX_CONCURRENCY),
    )


async def fetch_image(url: str, client: httpx.AsyncClient) -> Tuple[bytes, str]:
    """GET an image, returning its body and content type."""
    response = await client.get(url)
    response.raise_for_status()
    content_type = response.headers.get('content-type', '')
    if not content_type.startswith('image/'):
        raise ImageFetchError(f"unexpected content type {content_type!r} from {url}")
    return response.content, content_type.split(';')[0].strip()


async def load_image(url: str, client: httpx.AsyncClient) -> ImageState:
    """Resolve an avatar URL into ``Loaded`` or ``Failed``. No retries."""
    try:
        data, mime_type = await fetch_image(url, client)
    except (httpx.HTTPError, ImageFetchError) as e:
        logger.warning("Image load failed for %s: %s", url, e)
        return Failed(reason=str(e) or type(e).__name__)
    return Loaded(data=data, mime_type=mime_type)


async def _load_tagged(url: str, client: httpx.AsyncClient) -> Tuple[str, ImageState]:
    return url, await load_image(url, client)


async def resolve_images_async(urls: Iterable[str],
                               on_result: Callable[[str, ImageState], None],
                               client: Optional[httpx.AsyncClient] = None):
    """Load all ``urls`` concurrently, calling ``on_result`` in completion order."""
    urls = list(urls)
    if not urls:
        return
    own_client = client is None
    client = client if client is not None else build_async_client()
    try:
        tasks = [_load_tagged(u, client) for u in urls]
        for finished in asyncio.as_completed(tasks):
            url, state = await finished
            on_result(url, state)
    finally:
        if own_client:
            await client.aclose()


def resolve_images(urls: Iterable[str],
                   on_result: Callable[[str, ImageState], None],
                   client: Optional[httpx.AsyncClient] = None):
    """Blocking entry point for the script thread."""
    asyncio.run(resolve_images_async(urls, on_result, client))
