# server/bloommap/services/http.py

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from bloommap.core.config import HTTP_TIMEOUT

# Reintentos solo para errores transitorios y métodos idempotentes
DEFAULT_RETRY = Retry(
    total=3,
    backoff_factor=1,
    status_forcelist=[429, 502, 503, 504],
    allowed_methods=["GET", "HEAD", "OPTIONS"],
    raise_on_status=False,
)


def create_session(retry: Retry = None, timeout: float = HTTP_TIMEOUT) -> requests.Session:
    """
    Crea un requests.Session con el adaptador de reintentos montado
    y un timeout por defecto en cada petición.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = "bloommap/1.0"

    original_send = s.send

    def send_with_timeout(prepared, **kwargs):
        kwargs.setdefault("timeout", timeout)
        return original_send(prepared, **kwargs)

    s.send = send_with_timeout
    return s
