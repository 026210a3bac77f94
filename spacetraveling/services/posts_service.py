import logging
from typing import List, Optional

from spacetraveling.schemas.blog import (
    PostListItem,
    PostsPage,
    PostSummary,
    PostView,
)
from spacetraveling.services.date_format import format_date, is_edited
from spacetraveling.services.pagination import PaginationCursor
from spacetraveling.services.reading_time import (
    DEFAULT_WORDS_PER_MINUTE,
    estimate,
    format_reading_time,
)

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(
        self,
        repo,
        words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
        page_size: int = 1,
        paths_page_size: int = 3,
    ):
        self.repo = repo
        self.words_per_minute = words_per_minute
        self.page_size = page_size
        self.paths_page_size = paths_page_size

    def first_page(self) -> PostsPage:
        page = self.repo.fetch_first_page(self.page_size)
        return to_posts_page(PaginationCursor.from_page(page))

    def load_more(self, current: PostsPage) -> PostsPage:
        """Append the next page to the posts the client already holds."""
        cursor = to_cursor(current)
        return to_posts_page(cursor.advance(self.repo.fetch_page))

    def get_post(self, uid: str, ref: Optional[str] = None) -> Optional[PostView]:
        post = self.repo.fetch_detail(uid, ref=ref)
        if not post:
            return None

        minutes = estimate(post.content, self.words_per_minute)
        prev_post = self.repo.fetch_neighbor(post.id, newest_first=True)
        next_post = self.repo.fetch_neighbor(post.id, newest_first=False)
        logger.debug(f"Post {uid}: {minutes} min, prev={prev_post}, next={next_post}")

        return PostView(
            post=post,
            readingTime=format_reading_time(minutes),
            readingMinutes=minutes,
            publishedAt=_format_optional(post.first_publication_date),
            updatedAt=_format_optional(post.last_publication_date),
            edited=is_edited(post.first_publication_date, post.last_publication_date),
            prevPost=prev_post,
            nextPost=next_post,
            preview=ref is not None,
        )

    def list_paths(self) -> List[str]:
        return self.repo.list_uids(self.paths_page_size)


def to_posts_page(cursor: PaginationCursor) -> PostsPage:
    return PostsPage(
        results=[
            PostListItem(
                **item.model_dump(),
                formattedDate=_format_optional(item.first_publication_date),
            )
            for item in cursor.items
        ],
        next_page=cursor.next_page_token,
    )


def to_cursor(page: PostsPage) -> PaginationCursor:
    items = tuple(
        PostSummary(**item.model_dump(exclude={"formattedDate"}))
        for item in page.results
    )
    return PaginationCursor(items=items, next_page_token=page.next_page)


def _format_optional(value) -> Optional[str]:
    return format_date(value) if value else None
