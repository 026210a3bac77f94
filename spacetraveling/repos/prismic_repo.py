import logging
from typing import List, Optional

import httpx

from spacetraveling.errors import FetchError, InvalidArgument
from spacetraveling.schemas.blog import PageResult, PostDetail, PostLink
from spacetraveling.services.content_parser import (
    to_page_result,
    to_post_detail,
    to_post_link,
    to_uids,
)

logger = logging.getLogger(__name__)

POSTS_TYPE_PREDICATE = '[at(document.type, "posts")]'
SUMMARY_FIELDS = "posts.title,posts.subtitle,posts.author"
SEARCH_PATH = "documents/search"


class PrismicPostsRepo:
    """Reads `posts` documents from the Prismic REST API (v2)."""

    def __init__(self, client: httpx.Client, access_params: Optional[dict] = None):
        self.client = client
        self.access_params = access_params or {}

    def fetch_first_page(self, page_size: int) -> PageResult:
        payload = self._search(
            [POSTS_TYPE_PREDICATE],
            pageSize=page_size,
            page=1,
            fetch=SUMMARY_FIELDS,
        )
        return self._map(to_page_result, payload, "first page")

    def fetch_page(self, token: str) -> PageResult:
        """``token`` is the ``next_page`` URL returned with the previous page."""
        if not self._belongs_to_source(token):
            raise FetchError(
                token, "page token does not belong to the content source"
            )
        payload = self._get_json(token)
        return self._map(to_page_result, payload, token)

    def fetch_detail(
        self, uid: str, ref: Optional[str] = None
    ) -> Optional[PostDetail]:
        payload = self._search(
            [POSTS_TYPE_PREDICATE, f"[at(my.posts.uid, {_quote(uid)})]"],
            ref=ref,
            pageSize=1,
        )
        results = payload.get("results") or []
        if not results:
            return None
        return self._map(to_post_detail, results[0], uid)

    def fetch_neighbor(
        self, document_id: str, newest_first: bool
    ) -> Optional[PostLink]:
        """The post right after ``document_id`` in publication order."""
        direction = " desc" if newest_first else ""
        payload = self._search(
            [POSTS_TYPE_PREDICATE],
            pageSize=1,
            after=document_id,
            orderings=f"[document.first_publication_date{direction}]",
            fetch="posts.title",
        )
        results = payload.get("results") or []
        if not results:
            return None
        return self._map(to_post_link, results[0], document_id)

    def list_uids(self, page_size: int) -> List[str]:
        payload = self._search([POSTS_TYPE_PREDICATE], pageSize=page_size)
        return self._map(to_uids, payload, "static paths")

    def master_ref(self) -> str:
        api = self._get_json("")
        for ref in api.get("refs") or []:
            if ref.get("isMasterRef"):
                return ref["ref"]
        raise FetchError(str(self.client.base_url), "no master ref advertised")

    def _search(
        self, predicates: List[str], ref: Optional[str] = None, **options
    ) -> dict:
        params = [("ref", ref or self.master_ref())]
        params.extend(("q", predicate) for predicate in predicates)
        params.extend((key, str(value)) for key, value in options.items())
        return self._get_json(SEARCH_PATH, params=params)

    def _get_json(self, url: str, params=None) -> dict:
        # Access params go into the URL query or the explicit params, never both
        target = url or str(self.client.base_url)
        if params is None:
            request_url = httpx.URL(url).copy_merge_params(self.access_params)
        else:
            request_url = httpx.URL(url)
            params = list(params) + list(self.access_params.items())

        try:
            response = self.client.get(request_url, params=params)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Request to {target} failed: {e}")
            raise FetchError(target, str(e)) from e

        if not isinstance(payload, dict):
            raise FetchError(target, "unexpected response body")
        return payload

    def _belongs_to_source(self, token: str) -> bool:
        try:
            url = httpx.URL(token)
        except httpx.InvalidURL:
            return False
        base = self.client.base_url
        return (
            url.scheme == base.scheme
            and url.host == base.host
            and url.port == base.port
            and url.path.startswith(base.path + SEARCH_PATH)
        )

    @staticmethod
    def _map(mapper, payload, token: str):
        try:
            return mapper(payload)
        except (InvalidArgument, KeyError, TypeError, AttributeError, ValueError) as e:
            logger.warning(f"Could not read document(s) for {token}: {e}")
            raise FetchError(token, f"malformed document: {e}") from e


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
