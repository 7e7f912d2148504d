"""Blog API client.

A thin wrapper around the ``/api/users`` REST endpoints using the
``requests`` library.  Every public method returns a tuple
``(data, error)``: on success ``data`` holds the decoded JSON body and
``error`` is ``None``; on failure ``data`` is ``None`` and ``error`` is a
dictionary with the keys ``status_code`` and ``message``.

Example::

    api = BlogAPI(base_url="http://localhost:9000")
    user, error = api.create_user("Frodo Baggins")
    if error:
        print(error["status_code"], error["message"])
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class BlogAPI:
    """Client for the users and posts endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Server address, e.g. ``http://localhost:9000``.
                The ``/api/users`` prefix is appended by the client.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request against ``/api/users<path>``."""
        url = f"{self.base_url}/api/users{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    body = exc.response.json()
                    message = (body.get("message") if isinstance(body, dict) else None) or str(body)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", "")
        return (data or []), error

    def get_user(self, user_id: Any) -> Result:
        return self._request("GET", f"/{user_id}")

    def create_user(self, name: str) -> Result:
        return self._request("POST", "", json_body={"name": name})

    def update_user(self, user_id: Any, name: str) -> Result:
        return self._request("PUT", f"/{user_id}", json_body={"name": name})

    def delete_user(self, user_id: Any) -> Result:
        """Delete a user; ``data`` is the user as it was before deletion."""
        return self._request("DELETE", f"/{user_id}")

    # ------------------------------------------------------------------
    # Posts
    # ------------------------------------------------------------------
    def list_user_posts(self, user_id: Any) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", f"/{user_id}/posts")
        return (data or []), error

    def create_post(self, user_id: Any, text: str) -> Result:
        return self._request("POST", f"/{user_id}/posts", json_body={"text": text})
