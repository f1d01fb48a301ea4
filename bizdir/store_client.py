"""
Directory Store Client - read and create business rows in the hosted record store.

The store speaks the PostgREST dialect used by Supabase:

    GET  {url}/rest/v1/{table}?select=id,name,...   -> list of rows
    POST {url}/rest/v1/{table}                      -> echoed row(s)

Calls never raise for HTTP or transport failures. They return a StoreResponse
carrying either `data` or an `error` message, so the caller decides how to
surface the failure.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import requests

from .config import Settings, get_settings
from .utils.logger import get_logger

REST_PREFIX = "/rest/v1"
DEFAULT_FIELDS = ("id", "name", "category", "location", "description")

logger = get_logger(__name__)


@dataclass
class StoreResponse:
    """Result of a store call: either `data` or `error` is meaningful."""

    data: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DirectoryStoreClient:
    """
    Client for the hosted business table.

    Provides methods to:
    - Select all rows (optionally ordered)
    - Insert a single row and read back the persisted copy
    """

    def __init__(
        self,
        url: Optional[str] = None,
        key: Optional[str] = None,
        table: str = "businesses",
        order_by: Optional[str] = None,
        echo_inserts: bool = True,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the store client.

        Args:
            url: Base project URL, e.g. https://xyz.supabase.co
            key: Anon/service key sent as `apikey` and bearer token
            table: Table holding the business rows
            order_by: Optional PostgREST order clause, e.g. "created_at.desc"
            echo_inserts: Ask the store to return created rows
            timeout: Optional transport timeout in seconds (None waits forever)
            session: Optional requests session (tests, connection reuse)
        """
        self.url = (url or "").strip().rstrip("/")
        self.key = (key or "").strip()
        self.table = table
        self.order_by = order_by
        self.echo_inserts = echo_inserts
        self.timeout = timeout
        self.session = session

        if not self.is_configured:
            logger.warning("Store client is not configured (missing URL or key)")

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "DirectoryStoreClient":
        settings = settings or get_settings()
        return cls(
            url=settings.store_url,
            key=settings.store_key,
            table=settings.table_name,
            order_by=settings.order_by,
            echo_inserts=settings.echo_inserts,
            timeout=settings.http_timeout,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.url and self.key)

    @property
    def table_url(self) -> str:
        return f"{self.url}{REST_PREFIX}/{self.table}"

    def _get_headers(self, prefer: Optional[str] = None) -> dict:
        """Get authorization headers for store requests."""
        headers = {
            "apikey": self.key,
            "Authorization": f"Bearer {self.key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if prefer:
            headers["Prefer"] = prefer
        return headers

    def _request(self, method: str, prefer: Optional[str] = None, **kwargs) -> StoreResponse:
        """
        Make an authenticated store request.

        Args:
            method: HTTP method (GET, POST)
            prefer: Optional PostgREST Prefer header
            **kwargs: Additional arguments for requests

        Returns:
            StoreResponse with the decoded JSON body (None for an empty body)
        """
        if not self.is_configured:
            return StoreResponse(error="Store client is not configured")

        sender = self.session.request if self.session is not None else requests.request
        try:
            response = sender(
                method,
                self.table_url,
                headers=self._get_headers(prefer),
                timeout=self.timeout,
                **kwargs,
            )
        except requests.RequestException as exc:
            logger.error("Store %s failed: %s", method, exc)
            return StoreResponse(error=str(exc) or exc.__class__.__name__)

        if not response.ok:
            message = self._error_message(response)
            logger.error("Store %s returned %s: %s", method, response.status_code, message)
            return StoreResponse(error=message)

        if not response.content or not response.content.strip():
            return StoreResponse(data=None)
        try:
            return StoreResponse(data=response.json())
        except ValueError as exc:
            logger.error("Store %s returned invalid JSON: %s", method, exc)
            return StoreResponse(error=f"Invalid response from store: {exc}")

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Best-effort extraction of the PostgREST error message."""
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            for key in ("message", "error_description", "error", "hint"):
                if body.get(key):
                    return str(body[key])
        text = (response.text or "").strip()
        return text or f"HTTP {response.status_code}"

    def select(self, fields: Sequence[str] = DEFAULT_FIELDS) -> StoreResponse:
        """
        Fetch every row of the table.

        Args:
            fields: Columns to select

        Returns:
            StoreResponse whose data is a list of row dicts
        """
        params = {"select": ",".join(fields)}
        if self.order_by:
            params["order"] = self.order_by

        result = self._request("GET", params=params)
        if not result.ok:
            return result
        rows: List[Dict[str, Any]] = result.data if isinstance(result.data, list) else []
        logger.info("Fetched %d rows from %s", len(rows), self.table)
        return StoreResponse(data=rows)

    def insert(self, record: Dict[str, Any]) -> StoreResponse:
        """
        Insert one row.

        Args:
            record: Column values for the new row

        Returns:
            StoreResponse whose data is the echoed row, or None when the
            store only confirmed success
        """
        prefer = "return=representation" if self.echo_inserts else "return=minimal"
        result = self._request("POST", prefer=prefer, json=[record])
        if not result.ok:
            return result

        row = result.data
        if isinstance(row, list):
            row = row[0] if row else None
        if not isinstance(row, dict):
            row = None
        logger.info("Inserted row into %s (echo=%s)", self.table, row is not None)
        return StoreResponse(data=row)
