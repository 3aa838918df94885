"""SportConnect API client.

A thin wrapper around the ``/api/v1`` HTTP endpoints for scripts and
other front ends.  Every method returns a tuple ``(data, error)``:
``data`` holds the parsed JSON on success and ``error`` is ``None``;
on failure ``data`` is ``None`` (or an empty list for list calls) and
``error`` is a dictionary with ``status_code`` and ``message``.

Example::

    client = SportConnectAPI(base_url="http://localhost:8000")
    me, _ = client.me()
    result, error = client.toggle_membership("m1", me["id"])
    if error and error["status_code"] == 409:
        print("Match is full")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class SportConnectAPI:
    """Client for the SportConnect match API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/api/v1",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Server address, e.g. ``http://localhost:8000``.
            prefix: Path prefix of the versioned API.
            timeout: Per-request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/") + prefix
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method=method, url=url, json=json_body, timeout=self.timeout)
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def me(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Return the current user."""
        return self._request("GET", "/auth/me")

    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/users/")

    def list_rankings(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/rankings/")

    def list_matches(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Return all matches, newest first."""
        return self._list("/matches/")

    def get_match(self, match_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/matches/{match_id}")

    def create_match(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a match.

        Args:
            payload: Request body with ``title`` and ``location`` and
                optionally ``sport``, ``date``, ``time``, ``maxPlayers``,
                ``price`` and ``organizerId``.
        """
        return self._request("POST", "/matches/", json_body=payload)

    def toggle_membership(self, match_id: str, user_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Join the match, or leave it if ``user_id`` is already a member.

        Returns:
            A tuple ``(result, error)`` where ``result`` has the keys
            ``action`` (``joined`` or ``left``) and ``match``.
        """
        return self._request("POST", f"/matches/{match_id}/membership", json_body={"userId": user_id})
