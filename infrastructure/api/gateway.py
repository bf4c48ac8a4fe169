"""
Single outbound chokepoint for backend calls.

Every request reads the credential store right before dispatch and carries
`Authorization: Bearer <token>` when one is present. One attempt per call:
no retries, no caching, no request dedupe.
"""

import logging
from typing import Any, Optional

import requests

log = logging.getLogger(__name__)


class GatewayError(Exception):
    """Transport failure or non-2xx response. Classification is up to the caller."""

    def __init__(self, message: str, status_code: Optional[int] = None, detail: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


def _extract_detail(resp: requests.Response) -> Optional[str]:
    try:
        body = resp.json()
    except ValueError:
        return resp.text or None
    if isinstance(body, dict) and body.get("detail"):
        detail = body["detail"]
        return detail if isinstance(detail, str) else str(detail)
    return None


class ApiGateway:
    def __init__(self, base_url: str, credential_store, timeout: Optional[float] = None):
        self.base_url = base_url.rstrip("/")
        self.credential_store = credential_store
        self.timeout = timeout
        self._http = requests.Session()

    def _headers(self, extra: Optional[dict] = None) -> dict:
        headers = dict(extra or {})
        token = self.credential_store.get()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        headers = self._headers(kwargs.pop("headers", None))
        try:
            resp = self._http.request(method, url, headers=headers, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            log.warning(f"{method} {path} failed: {e.__class__.__name__}")
            raise GatewayError(f"Network error on {method} {path}: {e}") from e

        if not 200 <= resp.status_code < 300:
            detail = _extract_detail(resp)
            log.warning(f"{method} {path} -> HTTP {resp.status_code}")
            raise GatewayError(
                f"{method} {path} failed: HTTP {resp.status_code}",
                status_code=resp.status_code,
                detail=detail,
            )

        if resp.status_code == 204 or not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise GatewayError(f"{method} {path} returned a non-JSON body", status_code=resp.status_code) from e

    def get(self, path: str, **kwargs: Any) -> Any:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> Any:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs: Any) -> Any:
        return self.request("PUT", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> Any:
        return self.request("DELETE", path, **kwargs)
