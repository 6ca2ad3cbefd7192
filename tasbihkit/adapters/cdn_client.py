"""
CDN dataset client for TasbihKit.
"""

from typing import Any, Tuple

import httpx

from shared.config import DEFAULT_CDN_BASE_URL, TasbihSettings
from shared.errors import FetchFailedError, ParseFailedError
from shared.logging import get_logger
from ..domain.models import TasbihItem


class CdnDatasetClient:
    """Client for retrieving per-category JSON datasets from the CDN.

    One GET per call and no retries; the cache in front of this client
    decides when a fetch happens.
    """

    def __init__(self, base_url: str = DEFAULT_CDN_BASE_URL, timeout: float = 10.0):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.logger = get_logger("tasbihkit.cdn_client")

    @classmethod
    def from_settings(cls, settings: TasbihSettings) -> "CdnDatasetClient":
        return cls(settings.cdn_base_url, timeout=settings.http_timeout)

    def dataset_url(self, category_key: str) -> str:
        """URL for a normalized category key, inserted without encoding."""
        return f"{self.base_url}/{category_key}.json"

    async def fetch_category(self, category_key: str) -> Tuple[TasbihItem, ...]:
        """Fetch and decode the dataset for ``category_key``."""
        url = self.dataset_url(category_key)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            self.logger.warning("Dataset request failed", url=url, error=str(exc))
            raise FetchFailedError(
                category_key,
                f"Category file '{category_key}.json' could not be fetched: {exc}",
                details={"url": url, "error": str(exc)}
            ) from exc

        if not response.is_success:
            self.logger.warning(
                "Dataset request returned error status",
                url=url,
                status_code=response.status_code
            )
            raise FetchFailedError(
                category_key,
                status_code=response.status_code,
                details={"url": url}
            )

        items = self._parse(category_key, response)
        self.logger.debug("Dataset retrieved", url=url, items=len(items))
        return items

    def _parse(self, category_key: str, response: httpx.Response) -> Tuple[TasbihItem, ...]:
        status_code = response.status_code
        try:
            payload: Any = response.json()
        except ValueError as exc:
            raise ParseFailedError(
                category_key,
                f"Category file '{category_key}.json' is not valid JSON: {exc}",
                status_code=status_code
            ) from exc

        if not isinstance(payload, list):
            raise ParseFailedError(
                category_key,
                f"Category file '{category_key}.json' must contain a JSON array, "
                f"got {type(payload).__name__}.",
                status_code=status_code
            )

        items = []
        for index, record in enumerate(payload):
            if not isinstance(record, dict):
                raise ParseFailedError(
                    category_key,
                    f"Entry {index} in '{category_key}.json' is not an object.",
                    status_code=status_code,
                    details={"index": index}
                )
            items.append(TasbihItem.model_validate(record))
        return tuple(items)

