"""Login state for the POS client.

The token and tenant live in an injected key-value store so the same
session logic works with an in-memory store in tests or a file/keyring
backed store in a real terminal.
"""

from typing import TYPE_CHECKING, Optional, Protocol

import structlog

from .errors import ClientError, errmsg

if TYPE_CHECKING:
    from .client import ApiClient

logger = structlog.get_logger()

TOKEN_KEY = "token"
TENANT_ID_KEY = "tenantId"
TENANT_NAME_KEY = "tenantName"
USER_EMAIL_KEY = "userEmail"

_KEYS = (TOKEN_KEY, TENANT_ID_KEY, TENANT_NAME_KEY, USER_EMAIL_KEY)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def clear(self, key: str) -> None: ...


class InMemoryStore:
    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def clear(self, key: str) -> None:
        self._data.pop(key, None)


class AuthSession:
    def __init__(self, api: "ApiClient", store: KeyValueStore):
        self._api = api
        self._store = store
        self.token: Optional[str] = None
        self.tenant_id: Optional[str] = None
        self.tenant_name = ""
        self.user: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token and self.tenant_id)

    def restore(self) -> bool:
        """Reload a previous login from the store. Returns True if one was found."""
        token = self._store.get(TOKEN_KEY)
        tenant_id = self._store.get(TENANT_ID_KEY)
        if not (token and tenant_id):
            return False
        self.token = token
        self.tenant_id = tenant_id
        self.tenant_name = self._store.get(TENANT_NAME_KEY) or ""
        self.user = self._store.get(USER_EMAIL_KEY) or ""
        return True

    def login(self, email: str, password: str) -> None:
        body = self._api.post("/auth/login", {"email": email, "password": password})
        try:
            token = body["session"]["access_token"]
            tenant = body["tenant"]
            tenant_id = str(tenant["id"])
        except (KeyError, TypeError) as e:
            raise ClientError("malformed login response", e) from e
        tenant_name = tenant.get("business_name") or ""

        self.token = token
        self.tenant_id = tenant_id
        self.tenant_name = tenant_name
        self.user = email

        self._store.set(TOKEN_KEY, token)
        self._store.set(TENANT_ID_KEY, tenant_id)
        self._store.set(TENANT_NAME_KEY, tenant_name)
        self._store.set(USER_EMAIL_KEY, email)
        logger.info("logged_in", tenant_id=tenant_id)

    def signup(self, business_name: str, tenant_code: str, email: str, password: str):
        return self._api.post(
            "/auth/signup",
            {
                "business_name": business_name,
                "tenant_code": tenant_code,
                "email": email,
                "password": password,
            },
        )

    def require_tenant(self) -> str:
        if not self.tenant_id:
            raise ClientError(errmsg.NOT_LOGGED_IN)
        return self.tenant_id

    def logout(self) -> None:
        self.token = None
        self.tenant_id = None
        self.tenant_name = ""
        self.user = None
        for key in _KEYS:
            self._store.clear(key)
