import random
from datetime import UTC
from datetime import datetime
from datetime import timedelta
from http.cookiejar import Cookie
from typing import Final

import httpx

from listenone.infrastructure.adapters.providers.netease.crypto import create_secret_key

COOKIE_DOMAIN: Final[str] = "music.163.com"
COOKIE_UID_SIZE: Final[int] = 32
COOKIE_LIFETIME: Final[timedelta] = timedelta(days=365 * 100)


def _build_cookie(name: str, value: str, expires: int) -> Cookie:
    return Cookie(
        version=0,
        name=name,
        value=value,
        port=None,
        port_specified=False,
        domain=COOKIE_DOMAIN,
        domain_specified=True,
        domain_initial_dot=False,
        path="/",
        path_specified=True,
        secure=False,
        expires=expires,
        discard=False,
        comment=None,
        comment_url=None,
        rest={},
    )


def create_cookie_jar(rng: random.Random | None = None, now: datetime | None = None) -> httpx.Cookies:
    """Synthesizes the visitor cookies expected by Netease, valid for a century.

    `_ntes_nuid` holds a random visitor id and `_ntes_nnid` the same id
    followed by the creation timestamp in milliseconds.
    """
    now = now or datetime.now(UTC)

    uid = create_secret_key(COOKIE_UID_SIZE, rng)
    timestamp = int(now.timestamp() * 1000)
    expires = int((now + COOKIE_LIFETIME).timestamp())

    cookies = httpx.Cookies()
    cookies.jar.set_cookie(_build_cookie("_ntes_nuid", uid, expires))
    cookies.jar.set_cookie(_build_cookie("_ntes_nnid", f"{uid},{timestamp}", expires))

    return cookies
