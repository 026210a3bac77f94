import logging
from typing import Any, List, Optional

from spacetraveling.schemas.blog import (
    PageResult,
    PostDetail,
    PostLink,
    PostSummary,
    Section,
    TextBlock,
)
from spacetraveling.services.date_format import parse_timestamp

logger = logging.getLogger(__name__)


def to_post_summary(doc: dict) -> Optional[PostSummary]:
    """Map a CMS document to a PostSummary, or None when it has no uid."""
    uid = doc.get("uid")
    if not uid:
        logger.warning(f"Skipping document {doc.get('id')} without uid")
        return None

    data = doc.get("data") or {}
    return PostSummary(
        uid=uid,
        first_publication_date=parse_timestamp(doc.get("first_publication_date")),
        title=plain_text(data.get("title")),
        subtitle=plain_text(data.get("subtitle")),
        author=plain_text(data.get("author")),
    )


def to_post_detail(doc: dict) -> PostDetail:
    data = doc.get("data") or {}
    banner = data.get("banner") or {}
    return PostDetail(
        id=doc["id"],
        uid=doc.get("uid") or "",
        first_publication_date=parse_timestamp(doc.get("first_publication_date")),
        last_publication_date=parse_timestamp(doc.get("last_publication_date")),
        title=plain_text(data.get("title")),
        banner_url=banner.get("url") or "",
        author=plain_text(data.get("author")),
        content=[_to_section(item) for item in data.get("content") or []],
    )


def to_post_link(doc: dict) -> Optional[PostLink]:
    uid = doc.get("uid")
    if not uid:
        return None
    data = doc.get("data") or {}
    return PostLink(uid=uid, title=plain_text(data.get("title")))


def to_page_result(payload: dict) -> PageResult:
    """Map a search response (``results`` + ``next_page``) to a PageResult."""
    items = []
    for doc in payload.get("results") or []:
        summary = to_post_summary(doc)
        if summary:
            items.append(summary)
    return PageResult(items=items, next_page_token=payload.get("next_page") or None)


def to_uids(payload: dict) -> List[str]:
    return [doc["uid"] for doc in payload.get("results") or [] if doc.get("uid")]


def plain_text(value: Any) -> str:
    """
    Key text fields arrive as strings, rich text fields as a list of blocks.
    Blocks are joined with a space so their words stay separate.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return " ".join(
            block.get("text", "") for block in value if isinstance(block, dict)
        )
    return str(value)


def _to_section(item: dict) -> Section:
    return Section(
        heading=plain_text(item.get("heading")),
        body=_to_blocks(item.get("body")),
    )


def _to_blocks(body: Any) -> List[TextBlock]:
    if not body:
        return []
    if isinstance(body, str):
        return [TextBlock(text=body)]
    return [
        TextBlock(text=block.get("text") or "", type=block.get("type") or "paragraph")
        for block in body
        if isinstance(block, dict)
    ]
