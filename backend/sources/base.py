import asyncio
import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import httpx

from config import logger, settings
from exceptions import DataSourceException
from models.evidence import EvidenceItem, SourceCategory


class SourceProvider(ABC):
    """
    A public knowledge base queried for evidence about a claim.

    Subclasses implement `_search`; callers use `search`, which enforces the
    provider's time budget and turns every failure into an empty result.
    """

    name: str = "unknown"
    category: SourceCategory
    reliability: float = 0.5
    request_timeout: float = 5.0
    # Overall budget for one search; defaults to a single request.
    timeout: Optional[float] = None

    @property
    def search_budget(self) -> Optional[float]:
        """Seconds allowed for one `search`; None when the adapter budgets its own sub-queries."""
        return self.timeout or self.request_timeout

    async def search(self, query: str) -> List[EvidenceItem]:
        if not query or not query.strip():
            return []

        budget = self.search_budget
        try:
            if budget is None:
                return await self._search(query)
            return await asyncio.wait_for(self._search(query), timeout=budget)
        except asyncio.TimeoutError:
            logger.warning("%s search timed out after %ss", self.name, budget)
        except httpx.HTTPStatusError as e:
            logger.warning("%s API HTTP error %s", self.name, e.response.status_code)
        except httpx.RequestError as e:
            logger.warning("%s API request error: %s", self.name, str(e))
        except json.JSONDecodeError:
            logger.warning("%s API returned invalid JSON", self.name)
        except DataSourceException as e:
            logger.warning(e.message, extra=e.details)
        except Exception:
            logger.exception("Unexpected error during %s search", self.name)
        return []

    @abstractmethod
    async def _search(self, query: str) -> List[EvidenceItem]:
        ...

    async def _get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        headers = {"User-Agent": settings.HTTP_USER_AGENT, "Accept": "application/json"}
        async with httpx.AsyncClient(timeout=self.request_timeout, headers=headers) as client:
            r = await client.get(url, params=params)
            r.raise_for_status()
            return r.json()

    def _malformed(self, reason: str) -> DataSourceException:
        return DataSourceException(self.name, reason)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
