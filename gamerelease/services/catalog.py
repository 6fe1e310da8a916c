"""
Client for the IGDB release_dates endpoint.

Fetches every release of one platform (or a comma-joined platform list) inside a
week, following the scroll cursor the server hands out in `X-Next-Page` until
`X-Count` records have been read. Pages are fetched one after another because
each request needs the cursor of the previous response.
"""
from __future__ import annotations
import math
from typing import List, Dict, Any, Optional

import orjson
import requests
from pydantic import TypeAdapter, ValidationError

from gamerelease.core.config import Settings, mask
from gamerelease.core.errors import TransportError, CatalogStatusError, DecodeError
from gamerelease.models.schemas import ReleaseRecord
from gamerelease.services.logger import get_logger, timeblock
from gamerelease.services.weeks import WeekRange

log = get_logger(__name__)

_RECORDS = TypeAdapter(List[ReleaseRecord])


class ReleaseCatalog:
    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.base_url = settings.IGDB_API_URL.rstrip("/")
        self.page_size = settings.IGDB_PAGE_SIZE
        self.max_pages = settings.IGDB_MAX_PAGES
        self.timeout = settings.IGDB_TIMEOUT_SECONDS
        self.session = session or requests.Session()
        self.session.headers.update({
            "user-key": settings.IGDB_KEY,
            "Accept": "application/json",
        })

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def first_page_params(self, platform_id: str, week: WeekRange) -> Dict[str, str]:
        return {
            "fields": "*",
            "filter[platform][eq]": platform_id,
            "filter[date][gte]": str(week.start),
            "filter[date][lte]": str(week.end),
            "order": "popularity:desc",
            "limit": str(self.page_size),
            "scroll": "1",
            "expand": "game",
        }

    def fetch_releases(self, platform_id: str, week: WeekRange) -> List[ReleaseRecord]:
        """All release records for the platform in the week, in server (popularity) order."""
        log.info(f"Fetching releases platform={platform_id} range={week.start}..{week.end} key={mask(self.settings.IGDB_KEY)}")
        resp = self._get(f"{self.base_url}/release_dates/", self.first_page_params(platform_id, week), page=1)
        records = self._decode(resp)

        total = self._total_count(resp)
        pages = self._page_count(total)
        cursor = resp.headers.get("X-Next-Page")
        for page in range(2, pages + 1):
            if not cursor:
                raise DecodeError(f"Missing X-Next-Page header with {total} records and page {page} outstanding")
            resp = self._get(f"{self.base_url}{cursor}", {"fields": "*", "expand": "game"}, page=page)
            records.extend(self._decode(resp))
            cursor = resp.headers.get("X-Next-Page") or cursor

        log.info(f"Fetched {len(records)} release records in {pages} page(s), X-Count={total}")
        return records

    def _page_count(self, total: int) -> int:
        pages = max(1, math.ceil(total / self.page_size))
        if pages > self.max_pages:
            log.warning(f"X-Count={total} needs {pages} pages; reading only the first {self.max_pages}")
            pages = self.max_pages
        return pages

    def _get(self, url: str, params: Dict[str, str], page: int) -> requests.Response:
        with timeblock(log, f"release_dates page {page}"):
            try:
                resp = self.session.get(url, params=params, timeout=self.timeout)
            except requests.RequestException as e:
                log.error(f"IGDB request failed for page {page}: {e}")
                raise TransportError(f"IGDB request failed: {e}") from e
        if not 200 <= resp.status_code < 300:
            log.error(f"IGDB answered {resp.status_code} for page {page}")
            raise CatalogStatusError(f"IGDB answered HTTP {resp.status_code}", status_code=resp.status_code)
        return resp

    @staticmethod
    def _total_count(resp: requests.Response) -> int:
        raw = resp.headers.get("X-Count")
        try:
            total = int(raw)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"Invalid X-Count header: {raw!r}") from e
        if total < 0:
            raise DecodeError(f"Invalid X-Count header: {raw!r}")
        return total

    @staticmethod
    def _decode(resp: requests.Response) -> List[ReleaseRecord]:
        try:
            body: Any = orjson.loads(resp.content)
        except orjson.JSONDecodeError as e:
            log.error(f"IGDB body is not JSON: {e}")
            raise DecodeError(f"IGDB body is not JSON: {e}") from e
        if not isinstance(body, list):
            raise DecodeError(f"Expected a list of release dates, got {type(body).__name__}")
        try:
            return _RECORDS.validate_python(body)
        except ValidationError as e:
            log.error(f"IGDB records do not match the release schema: {e.error_count()} error(s)")
            raise DecodeError(f"Unexpected release record shape: {e}") from e
