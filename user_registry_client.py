"""User Registry API client.

This module defines a small client wrapper around the User Registry
REST API served by :mod:`user_registry_api`.  It uses the ``requests``
library internally and covers every endpoint the service exposes:

* :meth:`UserRegistryClient.list_users` – one page of users.
* :meth:`UserRegistryClient.list_all_users` – every user, unpaginated.
* :meth:`UserRegistryClient.get_user` – a single user by id.
* :meth:`UserRegistryClient.get_user_as_text` – the raw JSON text of a
  user, optionally requesting a gzip-compressed response.
* :meth:`UserRegistryClient.create_user` and
  :meth:`UserRegistryClient.create_user_from_form` – create a user from a
  JSON or a form-encoded body.
* :meth:`UserRegistryClient.update_user` and
  :meth:`UserRegistryClient.delete_user`.
* :meth:`UserRegistryClient.upload_photo`,
  :meth:`UserRegistryClient.get_photo` and
  :meth:`UserRegistryClient.download_photo`.

Every method returns a ``(result, error)`` tuple.  On success ``error``
is ``None``; on failure ``result`` is empty and ``error`` is a
dictionary with keys ``status_code`` and ``message``.  The client never
raises for HTTP or network errors.

Running the module executes a short demo against a running server::

    python user_registry_client.py --base-url http://localhost:7000 --photo ./cat.jpg
"""

from __future__ import annotations

import argparse
import logging
import mimetypes
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]

DEFAULT_BASE_URL = "http://localhost:7000"
DEFAULT_TIMEOUT = 15
DEFAULT_PHOTO_TYPE = "application/octet-stream"


class UserRegistryClient:
    """Client for interacting with the User Registry API."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:7000``.
                Include the prefix if the server runs with ``API_PREFIX``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _send(
        self,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> Tuple[Optional[requests.Response], Optional[ApiError]]:
        """Perform an HTTP request and return the raw response.

        Keyword arguments are passed to :meth:`requests.Session.request`.
        Returns a tuple ``(response, error)``; non-2xx responses and
        transport failures are turned into ``error``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method=method, url=url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
            return response, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = str(err_json.get("detail") or err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _request(self, method: str, path: str, **kwargs: Any) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request and decode the JSON body, if any."""
        response, error = self._send(method, path, **kwargs)
        if error:
            return None, error
        if not response.content:
            return None, None
        try:
            return response.json(), None
        except ValueError as exc:
            logger.error("Response from %s %s is not JSON: %s", method, path, exc)
            return None, {"status_code": response.status_code, "message": "Invalid JSON in response"}

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self, page: int = 1) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve one page of users.

        Returns:
            A tuple ``(page, error)``.  ``page`` holds the keys ``page``,
            ``perPage``, ``total``, ``totalPages`` and ``data``.
        """
        return self._request("GET", "/users", params={"page": page})

    def list_all_users(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        data, error = self._request("GET", "/users/list")
        if error:
            return [], error
        return data or [], None

    def get_user(self, user_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", f"/users/{user_id}")

    def get_user_as_text(self, user_id: Any, compressed: bool = False) -> Tuple[Optional[str], Optional[ApiError]]:
        """Retrieve a single user as raw response text.

        Args:
            user_id: Identifier of the user.
            compressed: Ask the server for a gzip-encoded response.
                ``requests`` decompresses it transparently.
        """
        headers = {"Accept-Encoding": "gzip" if compressed else "identity"}
        response, error = self._send("GET", f"/users/{user_id}", headers=headers)
        if error:
            return None, error
        return response.text, None

    def create_user(self, email: Optional[str], name: Optional[str]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Create a user by sending a JSON body."""
        return self._request("POST", "/users", json={"email": email, "name": name})

    def create_user_from_form(
        self, email: Optional[str], name: Optional[str]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Create a user by sending an ``application/x-www-form-urlencoded`` body.

        ``None`` values are left out of the form.
        """
        form = {key: value for key, value in (("email", email), ("name", name)) if value is not None}
        return self._request("POST", "/users", data=form)

    def update_user(
        self, user_id: Any, email: Optional[str], name: Optional[str]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("PUT", f"/users/{user_id}", json={"email": email, "name": name})

    def delete_user(self, user_id: Any) -> Tuple[bool, Optional[ApiError]]:
        response, error = self._send("DELETE", f"/users/{user_id}")
        if error:
            return False, error
        return response.status_code == 204, None

    # ------------------------------------------------------------------
    # Photo operations
    # ------------------------------------------------------------------
    def upload_photo(
        self,
        title: str,
        photo: Union[str, Path, bytes],
        content_type: Optional[str] = None,
    ) -> Tuple[bool, Optional[ApiError]]:
        """Upload a photo as ``multipart/form-data``.

        Args:
            title: Title the photo is stored under.
            photo: Path to the file to upload, or the raw bytes.
            content_type: Content type of the photo.  Guessed from the
                file name when omitted, ``application/octet-stream`` for
                raw bytes.
        """
        if isinstance(photo, bytes):
            filename, content = title, photo
        else:
            path = Path(photo)
            try:
                content = path.read_bytes()
            except OSError as exc:
                logger.error("Cannot read photo %s: %s", path, exc)
                return False, {"status_code": None, "message": str(exc)}
            filename = path.name
        if content_type is None:
            content_type = mimetypes.guess_type(filename)[0] or DEFAULT_PHOTO_TYPE
        response, error = self._send(
            "POST",
            "/photos",
            data={"title": title},
            files={"photo": (filename, content, content_type)},
        )
        if error:
            return False, error
        return response.status_code == 204, None

    def get_photo(self, title: str) -> Tuple[Optional[Tuple[bytes, str]], Optional[ApiError]]:
        """Fetch a photo.

        Returns:
            A tuple ``((content, content_type), error)``.
        """
        response, error = self._send("GET", f"/photos/{quote(title, safe='')}")
        if error:
            return None, error
        return (response.content, response.headers.get("Content-Type", DEFAULT_PHOTO_TYPE)), None

    def download_photo(self, title: str, destination: Union[str, Path]) -> Tuple[bool, Optional[ApiError]]:
        """Fetch a photo and write it to ``destination``, replacing any existing file."""
        result, error = self.get_photo(title)
        if error:
            return False, error
        content, _ = result
        try:
            Path(destination).write_bytes(content)
        except OSError as exc:
            logger.error("Cannot write photo to %s: %s", destination, exc)
            return False, {"status_code": None, "message": str(exc)}
        return True, None


# ----------------------------------------------------------------------
# Demo
# ----------------------------------------------------------------------
NON_EXISTENT_USER_ID = 23


def _log_result(result: Any, error: Optional[ApiError]) -> None:
    if error:
        logger.error("Unexpected response with status %s: %s", error["status_code"], error["message"])
    else:
        logger.info("Request result: %s", result)


def run_demo(client: UserRegistryClient, photo: Optional[Path] = None, download_to: Optional[Path] = None) -> None:
    """Call every endpoint once and log the outcome."""
    _log_result(*client.list_users(1))
    _log_result(*client.get_user(1))
    _log_result(*client.get_user(NON_EXISTENT_USER_ID))
    _log_result(*client.get_user_as_text(1))
    _log_result(*client.get_user_as_text(1, compressed=True))
    _log_result(*client.create_user("name@example.com", "name"))
    _log_result(*client.create_user_from_form("form@example.com", "form"))
    if photo is not None:
        title = photo.stem
        _log_result(*client.upload_photo(title, photo))
        if download_to is not None:
            _log_result(*client.download_photo(title, download_to))
    _log_result(*client.list_all_users())


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Exercise a running User Registry API.")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="Base URL of the API")
    parser.add_argument("--photo", type=Path, help="Photo file to upload")
    parser.add_argument("--download-to", type=Path, help="Where to save the photo fetched back from the server")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    run_demo(UserRegistryClient(base_url=args.base_url), photo=args.photo, download_to=args.download_to)


if __name__ == "__main__":
    main()
