"""HTTP client for the user backend."""
from __future__ import annotations

from typing import Any, Dict, List

import requests

from config import BACKEND_BASE_URL, REQUEST_TIMEOUT


class APIClient:
    def __init__(self, base_url: str = BACKEND_BASE_URL) -> None:
        self.base_url = base_url.rstrip("/")

    # -------------------- Users --------------------
    def list_users(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/users") or []

    def get_user(self, user_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/users/{user_id}")

    def create_user(self, **fields: Any) -> Dict[str, Any]:
        return self._request("POST", "/users", json=fields)

    def replace_user(self, user_id: int, **fields: Any) -> Dict[str, Any]:
        return self._request("PUT", f"/users/{user_id}", json=fields)

    def patch_user(self, user_id: int, **fields: Any) -> Dict[str, Any]:
        return self._request("PATCH", f"/users/{user_id}", json=fields)

    def delete_user(self, user_id: int) -> None:
        self._request("DELETE", f"/users/{user_id}")

    # -------------------- Internal helpers --------------------
    def _headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json"}

    def _request(self, method: str, path: str, json: Dict[str, Any] | None = None) -> Any:
        res = requests.request(
            method,
            f"{self.base_url}{path}",
            json=json,
            headers=self._headers(),
            timeout=REQUEST_TIMEOUT,
        )
        try:
            res.raise_for_status()
        except requests.HTTPError as exc:
            detail = f"{method} {path} -> {res.status_code} {res.reason}; body={res.text}"
            raise requests.HTTPError(detail, response=res) from exc
        return res.json() if res.text else None


def get_client(base_url: str | None = None) -> APIClient:
    return APIClient(base_url=base_url or BACKEND_BASE_URL)
