from __future__ import annotations

from functools import lru_cache
from typing import Any, Final

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import REQUEST_TIMEOUT

DEFAULT_HEADERS: Final[dict[str, str]] = {
    "User-Agent": "Mozilla/5.0 (compatible; LotofacilPro/1.0)",
    "Accept": "application/json",
}

# Só retenta falhas transitórias do servidor; 404 de concurso inexistente volta na hora
RETRY_STATUS: Final[tuple[int, ...]] = (429, 500, 502, 503, 504)


@lru_cache(maxsize=1)
def get_session() -> requests.Session:
    s = requests.Session()
    adapter = HTTPAdapter(
        max_retries=Retry(
            total=2,
            backoff_factor=0.5,
            status_forcelist=RETRY_STATUS,
            allowed_methods=("GET",),
            raise_on_status=False,
        )
    )
    s.mount("https://", adapter)
    s.headers.update(DEFAULT_HEADERS)
    return s


def get_json(url: str, *, timeout: float = REQUEST_TIMEOUT) -> Any:
    r = get_session().get(url, timeout=timeout)
    r.raise_for_status()
    return r.json()
