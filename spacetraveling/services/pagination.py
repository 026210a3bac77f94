import logging
from typing import Callable, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from spacetraveling.errors import FetchError
from spacetraveling.schemas.blog import PageResult, PostSummary

logger = logging.getLogger(__name__)

FetchPage = Callable[[str], PageResult]


class PaginationCursor(BaseModel):
    """
    Summaries fetched so far plus the token for the next page.

    Cursors are immutable: ``advance`` returns a new cursor and never touches
    the one it was called on, so a failed fetch leaves the caller's state as is.
    """

    model_config = ConfigDict(frozen=True)

    items: Tuple[PostSummary, ...] = ()
    next_page_token: Optional[str] = None

    @classmethod
    def from_page(cls, page: PageResult) -> "PaginationCursor":
        return cls(items=tuple(page.items), next_page_token=page.next_page_token)

    def has_more(self) -> bool:
        return bool(self.next_page_token)

    def advance(self, fetch_page: FetchPage) -> "PaginationCursor":
        if not self.has_more():
            return self

        token = self.next_page_token
        try:
            page = PageResult.model_validate(fetch_page(token))
        except FetchError:
            raise
        except Exception as e:
            logger.warning(f"Fetching page {token} failed: {e}")
            raise FetchError(token, str(e)) from e

        logger.debug(f"Appending {len(page.items)} posts from page {token}")
        return PaginationCursor(
            items=self.items + tuple(page.items),
            next_page_token=page.next_page_token,
        )
