from typing import Any, Dict, List, Optional

import requests


class FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    def __init__(
        self,
        responses: Optional[List[FakeResponse]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self._responses = list(responses or [])
        self._error = error
        self.requests: List[Dict[str, Any]] = []
        self.closed = False

    def post(self, url: str, json: Any = None, timeout: float | None = None) -> FakeResponse:
        self.requests.append({"url": url, "json": json, "timeout": timeout})
        if self._error is not None:
            raise self._error
        return self._responses.pop(0)

    def close(self) -> None:
        self.closed = True
