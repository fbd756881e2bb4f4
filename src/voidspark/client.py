from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import requests


class WorldClientError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class WorldClient:
    """Talks to a running Void Spark service over HTTP."""

    def __init__(self, base_url: str, timeout: float = 10.0) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def generate(self, prompt: str) -> Dict[str, Any]:
        return self._request("POST", "/generate", json={"prompt": prompt})

    def form_party(self, world_id: str) -> Dict[str, Any]:
        return self._request("POST", "/party", json={"id": world_id})

    def explore(self, world_id: str) -> Dict[str, Any]:
        return self._request("POST", "/explore", json={"id": world_id})

    def state(self, world_id: str) -> Dict[str, Any]:
        return self._request("GET", "/state", params={"id": world_id})

    def latest(self) -> Optional[str]:
        try:
            data = self._request("GET", "/api/latest-world")
        except WorldClientError as exc:
            if exc.status_code == 404:
                return None
            raise
        latest = data.get("latest")
        return str(latest) if latest else None

    def _request(
        self,
        method: str,
        path: str,
        json: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        url = f"{self._base_url}{path}"
        try:
            response = requests.request(method, url, json=json, params=params, timeout=self._timeout)
        except requests.RequestException as exc:
            raise WorldClientError(f"Request to {url} failed: {exc}") from exc
        if response.status_code >= 400:
            raise WorldClientError(
                f"{method} {path} returned status {response.status_code}: {response.text}",
                status_code=response.status_code,
            )
        try:
            data = response.json()
        except ValueError as exc:
            raise WorldClientError(f"Malformed response from {url}: {response.text}") from exc
        if not isinstance(data, dict):
            raise WorldClientError(f"Unexpected payload from {url}: {data!r}")
        return data
