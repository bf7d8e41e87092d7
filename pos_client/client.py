"""HTTP clients for the POS backend."""

from typing import Any, Optional

import requests
import structlog

from .auth import TOKEN_KEY, KeyValueStore
from .config import ApiConfig, get_api_config
from .errors import (
    RequestRejectedError,
    SubmissionRejectedError,
    TransportError,
    errmsg,
)
from .state import Product, TransactionPayload, Voucher

logger = structlog.get_logger()


def _error_message(response: requests.Response) -> str:
    """Pull the server's ``{"error": ...}`` message out of a failed response."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"request failed with status {response.status_code}"


class ApiClient:
    """Thin JSON-over-HTTP wrapper shared by the resource clients.

    Adds the bearer token from ``store`` when one is present. 4xx answers
    raise :class:`RequestRejectedError`; connection failures, timeouts, 5xx
    answers and unreadable bodies raise :class:`TransportError`.
    """

    def __init__(
        self,
        config: ApiConfig,
        store: Optional[KeyValueStore] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config
        self.store = store
        self._session = session or requests.Session()
        self._session.headers.update({"Content-Type": "application/json"})

    @classmethod
    def from_env(cls, store: Optional[KeyValueStore] = None) -> "ApiClient":
        """Build a client from POS_API_URL / POS_API_TIMEOUT."""
        return cls(get_api_config(), store)

    def _headers(self) -> dict[str, str]:
        token = self.store.get(TOKEN_KEY) if self.store is not None else None
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}

    def request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.config.base_url}/{path.lstrip('/')}"
        log = logger.bind(method=method, path=path)
        try:
            response = self._session.request(
                method, url, headers=self._headers(), timeout=self.config.timeout, **kwargs
            )
        except requests.RequestException as e:
            log.warning("request_failed", error=str(e))
            raise TransportError(e) from e

        if response.status_code >= 500:
            log.warning("server_error", status=response.status_code)
            raise TransportError(requests.HTTPError(_error_message(response), response=response))
        if response.status_code >= 400:
            raise RequestRejectedError(_error_message(response), status_code=response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise TransportError(e) from e

    def get(self, path: str, **kwargs) -> Any:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, data: Any = None) -> Any:
        return self.request("POST", path, json=data)

    def close(self) -> None:
        self._session.close()


class CatalogClient:
    """Read-only product lookup."""

    def __init__(self, api: ApiClient):
        self._api = api

    def get_products(self, tenant_id: str) -> list[Product]:
        body = self._api.get("/products", params={"tenant_id": tenant_id})
        return [Product.from_dict(item) for item in body or []]


class VoucherClient:
    """Read-only voucher lookup."""

    def __init__(self, api: ApiClient):
        self._api = api

    def get_vouchers(self, tenant_id: str) -> list[Voucher]:
        body = self._api.get("/vouchers", params={"tenant_id": tenant_id})
        return [Voucher.from_dict(item) for item in body or []]


class TransactionClient:
    """Transaction recorder backed by the transactions endpoint."""

    def __init__(self, api: ApiClient, tenant_id: str):
        self._api = api
        self.tenant_id = tenant_id

    def record(self, payload: TransactionPayload) -> str:
        return self.create_transaction(payload)

    def create_transaction(self, payload: TransactionPayload) -> str:
        data = payload.to_dict()
        data["tenant_id"] = self.tenant_id
        try:
            body = self._api.post("/transactions", data)
        except RequestRejectedError as e:
            raise SubmissionRejectedError(e.reason, status_code=e.status_code) from e

        code = body.get("transaction_code") if isinstance(body, dict) else None
        if not code:
            raise TransportError(ValueError(errmsg.MISSING_TRANSACTION_CODE))
        return str(code)
