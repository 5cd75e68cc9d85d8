"""HTTP adapter for the token price feed."""

from datetime import datetime
from decimal import InvalidOperation

import httpx

from src.application.ports.price_source import PriceSourcePort
from src.domain.models import PriceEntry
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class HttpPriceSource(PriceSourcePort):
    """Price source reading a JSON list of ``{currency, date, price}`` rows.

    Network and HTTP status errors propagate as ``httpx.HTTPError``. A body
    that is not a JSON list raises ``httpx.DecodingError``, so callers handle
    every feed failure through ``httpx.HTTPError``. Rows that cannot be
    parsed are skipped with a warning.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        logger=None,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the price source.

        Args:
            url: Absolute URL of the price feed.
            timeout: Request timeout in seconds.
            logger: Optional logger compatible with logging.Logger-like API.
            client: Optional preconfigured httpx client (used by tests).
        """
        self._url = url
        self._timeout = timeout
        self._logger = logger or get_app_logger()
        self._client = client

    def fetch_prices(self) -> list[PriceEntry]:
        """Fetch and parse the price feed."""
        if self._client is not None:
            payload = self._get(self._client)
        else:
            with httpx.Client(timeout=self._timeout) as client:
                payload = self._get(client)

        entries = []
        for row in payload:
            entry = self._parse_row(row)
            if entry is not None:
                entries.append(entry)
        return entries

    def _get(self, client: httpx.Client) -> list:
        response = client.get(self._url, headers={"Accept": "application/json"})
        response.raise_for_status()
        try:
            payload = response.json()
        except ValueError as exc:
            raise httpx.DecodingError(
                f"Price feed at {self._url} did not return JSON",
                request=response.request,
            ) from exc
        if not isinstance(payload, list):
            raise httpx.DecodingError(
                f"Unexpected price feed payload from {self._url}",
                request=response.request,
            )
        return payload

    def _parse_row(self, row) -> PriceEntry | None:
        if not isinstance(row, dict):
            self._logger.warning(f"Skipping malformed price row: {row!r}")
            return None
        currency = row.get("currency")
        if not isinstance(currency, str) or not currency.strip():
            self._logger.warning(f"Skipping price row without currency: {row!r}")
            return None
        try:
            price = coerce_decimal(row.get("price"))
        except (InvalidOperation, ValueError):
            self._logger.warning(
                f"Skipping price row with invalid price for {currency}"
            )
            return None
        return PriceEntry(
            symbol=currency.strip(),
            price=price,
            updated_at=_parse_timestamp(row.get("date")),
        )


def _parse_timestamp(value) -> datetime | None:
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


__all__ = ["HttpPriceSource"]
