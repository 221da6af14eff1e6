"""Client for the warehouse backend REST API."""

import logging
from typing import Any

import httpx

from gudang_admin.config import settings

logger = logging.getLogger(__name__)


class BackendAPIError(Exception):
    """Raised when a backend API call fails.

    Attributes:
        status_code: HTTP status of the failed response, None for transport errors
        message: Message supplied by the backend body, if any
    """

    def __init__(
        self,
        detail: str,
        status_code: int | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.message = message


class BackendAuthError(BackendAPIError):
    """Raised when credentials are rejected or no token is available."""


def _body_message(response: httpx.Response) -> str | None:
    """Extract the ``message`` field of a JSON error body, if present."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        if message:
            return str(message)
    return None


def _unwrap(response: Any) -> Any:
    """Return the ``data`` member of an envelope, or the body itself."""
    if isinstance(response, dict) and "data" in response:
        return response["data"]
    return response


class BackendClient:
    """Async client for the warehouse backend.

    Every call except ``login`` sends the session's Bearer token. The token
    is trusted as-is: there is no refresh and no retry.
    """

    def __init__(
        self,
        token: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the backend client.

        Args:
            token: Bearer token from the user's session.
            base_url: API base URL. Defaults to settings.
            timeout: Per-request timeout in seconds. Defaults to settings.
        """
        self.token = token
        self.base_url = (base_url or settings.backend_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.backend_timeout
        self._http_client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "BackendClient":
        """Enter async context manager."""
        self._http_client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            follow_redirects=True,
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Exit async context manager."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None

    @property
    def _client(self) -> httpx.AsyncClient:
        """Get the HTTP client, raising if not in context manager."""
        if self._http_client is None:
            raise RuntimeError("BackendClient must be used as an async context manager")
        return self._http_client

    async def _send(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
        authenticated: bool = True,
    ) -> httpx.Response:
        """Send a request and return the successful response.

        Raises:
            BackendAuthError: If a token is required but missing.
            BackendAPIError: On any non-2xx status or transport failure.
        """
        headers: dict[str, str] = {}
        if authenticated:
            if not self.token:
                raise BackendAuthError("No session token available")
            headers["Authorization"] = f"Bearer {self.token}"

        url = f"{self.base_url}{endpoint}"
        try:
            response = await self._client.request(
                method,
                url,
                headers=headers,
                params=params,
                json=json_data,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            message = _body_message(e.response)
            logger.error(
                "Backend API error: %s %s - %s %s",
                method,
                endpoint,
                status_code,
                e.response.text,
            )
            error_class = BackendAuthError if status_code == 401 else BackendAPIError
            raise error_class(
                f"API call failed: {status_code} - {message or e.response.text}",
                status_code=status_code,
                message=message,
            ) from e
        except httpx.RequestError as e:
            logger.error("Backend request error: %s %s - %s", method, endpoint, e)
            raise BackendAPIError(f"Request failed: {e}") from e

        return response

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
        authenticated: bool = True,
    ) -> Any:
        """Make an API request and return the parsed JSON body."""
        response = await self._send(method, endpoint, params, json_data, authenticated)
        try:
            return response.json()
        except ValueError as e:
            raise BackendAPIError(
                f"Invalid JSON from {endpoint}", status_code=response.status_code
            ) from e

    async def _get_list(
        self, endpoint: str, params: dict[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        """GET a collection, unwrapping the ``data`` envelope."""
        data = _unwrap(await self._request("GET", endpoint, params=params))
        if data is None:
            return []
        if not isinstance(data, list):
            raise BackendAPIError(f"Expected a list from {endpoint}")
        return data

    async def login(self, username: str, password: str) -> tuple[str, str]:
        """Exchange credentials for a session token.

        Returns:
            Tuple of (token, role).

        Raises:
            BackendAuthError: If the backend rejects the credentials or
                returns no token.
        """
        body = await self._request(
            "POST",
            settings.backend_login_path,
            json_data={"username": username, "password": password},
            authenticated=False,
        )
        data = _unwrap(body)
        if not isinstance(data, dict):
            data = {}
        token = data.get("token") or (body.get("token") if isinstance(body, dict) else None)
        role = data.get("role") or (body.get("role") if isinstance(body, dict) else None)
        if not token:
            raise BackendAuthError("Login response did not include a token")
        return str(token), str(role or "")

    async def list_items(self) -> list[dict[str, Any]]:
        """Fetch the full item (barang) collection."""
        return await self._get_list(settings.backend_items_path)

    async def get_item(self, item_id: str) -> dict[str, Any]:
        """Fetch a single item by identifier."""
        endpoint = settings.backend_item_detail_path.format(item_id=item_id)
        data = _unwrap(await self._request("GET", endpoint))
        if not isinstance(data, dict):
            raise BackendAPIError(f"Expected an object from {endpoint}")
        return data

    async def list_users(self, role: str) -> list[dict[str, Any]]:
        """Fetch users filtered by role."""
        return await self._get_list(settings.backend_users_path, params={"role": role})

    async def list_warehouses(self) -> list[dict[str, Any]]:
        """Fetch the warehouse (gudang) collection."""
        return await self._get_list(settings.backend_warehouses_path)

    async def list_revenue(self) -> list[dict[str, Any]]:
        """Fetch revenue (penerimaan) entries."""
        return await self._get_list(settings.backend_revenue_path)

    async def create_warehouse(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Create a warehouse record.

        Only HTTP 201 counts as success.

        Args:
            payload: Warehouse draft in the backend's JSON shape.

        Returns:
            The response body, or an empty dict when the body is not JSON.

        Raises:
            BackendAPIError: If the call fails or returns a status other than 201.
        """
        endpoint = settings.backend_create_warehouse_path
        response = await self._send("POST", endpoint, json_data=payload)
        if response.status_code != 201:
            logger.error(
                "Unexpected status creating warehouse: %s", response.status_code
            )
            raise BackendAPIError(
                f"Unexpected status: {response.status_code}",
                status_code=response.status_code,
                message=_body_message(response),
            )
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}
