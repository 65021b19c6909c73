# hashmap_core/transport/transport_http.py
import requests
from hashmap_core.logger import get_logger
from hashmap_core.transport.transport_base import (
    BaseContentStore,
    TransportPermanentError,
    TransportTransientError,
)

log = get_logger("hashmap.transport.http")


class HTTPContentStore(BaseContentStore):
    """
    HTTP content store client.

    - fetch:  GET  {endpoint}/{content_address}
    - submit: POST {endpoint} with the wire payload as the JSON body

    5xx responses and connection failures raise TransportTransientError,
    everything else that is not a JSON 2xx raises TransportPermanentError.
    """
    name = "http"

    def __init__(self, timeout: float = 5.0):
        self.timeout = timeout

    def fetch(self, endpoint: str, content_address: str):
        url = f"{endpoint.rstrip('/')}/{content_address}"
        log.debug(f"[HTTP GET] → {url}")
        try:
            res = requests.get(url, headers={"Accept": "application/json"}, timeout=self.timeout)
        except requests.RequestException as e:
            log.error(f"[HTTP GET] {url} failed: {e}")
            raise TransportTransientError(str(e)) from e
        log.info(f"[HTTP GET] {res.status_code} {res.reason} ← {url}")
        body = self._json_body(res, url)
        if not isinstance(body, dict):
            raise TransportPermanentError(f"{url}: expected a JSON object")
        return body

    def submit(self, endpoint: str, payload):
        url = endpoint.rstrip("/")
        log.debug(f"[HTTP POST] → {url} | bytes={len(self.to_bytes(payload))}")
        try:
            res = requests.post(
                url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            log.error(f"[HTTP POST] {url} failed: {e}")
            raise TransportTransientError(str(e)) from e
        log.info(f"[HTTP POST] {res.status_code} {res.reason} ← {url}")
        return self._json_body(res, url)

    @staticmethod
    def _json_body(res, url):
        if res.status_code >= 500:
            raise TransportTransientError(f"{url}: {res.status_code} {res.text}")
        if not res.ok:
            raise TransportPermanentError(f"{url}: {res.status_code} {res.text}")
        try:
            return res.json()
        except ValueError as e:
            raise TransportPermanentError(f"{url}: response is not JSON") from e
