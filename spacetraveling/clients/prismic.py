import logging
from urllib.parse import urlparse

import httpx

logger = logging.getLogger(__name__)

USER_AGENT = "spacetraveling/1.0"


class PrismicError(Exception):
    """Raised when the content API cannot be reached or answers badly."""


def at(path: str, value: str) -> str:
    return f'[at({path}, "{value}")]'


class PrismicClient:
    """Minimal client for the Prismic REST API v2."""

    def __init__(
        self,
        endpoint: str,
        access_token: str = "",
        timeout: float = 30,
        transport: httpx.BaseTransport | None = None,
    ):
        self.endpoint = endpoint.rstrip("/")
        self.access_token = access_token
        self._http = httpx.Client(
            timeout=timeout,
            transport=transport,
            follow_redirects=True,
            headers={"User-Agent": USER_AGENT},
        )

    def _get(self, url: str, params: dict | None = None) -> dict:
        params = dict(params or {})
        if self.access_token and "access_token" not in url:
            params["access_token"] = self.access_token
        try:
            response = self._http.get(url, params=params or None)
        except httpx.HTTPError as e:
            logger.exception("Content API request failed: %s", url)
            raise PrismicError(f"Request to {url} failed: {e}") from e

        if response.status_code != 200:
            logger.warning("Content API returned HTTP %d for %s", response.status_code, url)
            raise PrismicError(f"HTTP {response.status_code} from {url}")

        try:
            return response.json()
        except ValueError as e:
            raise PrismicError(f"Invalid JSON from {url}") from e

    def master_ref(self) -> str:
        api = self._get(self.endpoint)
        for ref in api.get("refs", []):
            if ref.get("isMasterRef"):
                return ref["ref"]
        raise PrismicError("Repository has no master ref")

    def query(
        self,
        predicates: list[str],
        ref: str | None = None,
        page_size: int = 20,
        page: int = 1,
        fetch: list[str] | None = None,
        orderings: str | None = None,
    ) -> dict:
        params = {
            "ref": ref or self.master_ref(),
            "q": "[" + "".join(predicates) + "]",
            "pageSize": page_size,
            "page": page,
        }
        if fetch:
            params["fetch"] = ",".join(fetch)
        if orderings:
            params["orderings"] = orderings
        return self._get(f"{self.endpoint}/documents/search", params)

    def get_by_uid(self, doc_type: str, uid: str, ref: str | None = None) -> dict | None:
        response = self.query([at(f"my.{doc_type}.uid", uid)], ref=ref, page_size=1)
        results = response.get("results") or []
        return results[0] if results else None

    def owns_url(self, url: str) -> bool:
        """True if ``url`` points at this repository's API."""
        ours = urlparse(self.endpoint)
        theirs = urlparse(url)
        prefix = ours.path.rstrip("/") + "/"
        return (
            theirs.scheme == ours.scheme
            and theirs.netloc == ours.netloc
            and (theirs.path == ours.path or theirs.path.startswith(prefix))
        )

    def get_page(self, url: str) -> dict:
        """Follow a ``next_page`` cursor returned by a previous query."""
        if not self.owns_url(url):
            raise ValueError(f"Not a page of {self.endpoint}: {url}")
        return self._get(url)

    def close(self):
        self._http.close()
