from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PostSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    uid: str = Field(min_length=1)
    first_publication_date: Optional[datetime] = None
    title: str = ""
    subtitle: str = ""
    author: str = ""


class TextBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = ""
    type: str = "paragraph"


class Section(BaseModel):
    model_config = ConfigDict(frozen=True)

    heading: str = ""
    body: List[TextBlock] = Field(default_factory=list)


class PostDetail(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    uid: str
    first_publication_date: Optional[datetime] = None
    last_publication_date: Optional[datetime] = None
    title: str = ""
    banner_url: str = ""
    author: str = ""
    content: List[Section] = Field(default_factory=list)


class PostLink(BaseModel):
    uid: str
    title: str = ""


class PageResult(BaseModel):
    items: List[PostSummary] = Field(default_factory=list)
    next_page_token: Optional[str] = None  # None means no more pages


# --- Response schemas ---


class PostListItem(PostSummary):
    formattedDate: Optional[str] = None


class PostsPage(BaseModel):
    results: List[PostListItem] = Field(default_factory=list)
    next_page: Optional[str] = None


class PostView(BaseModel):
    post: PostDetail
    readingTime: str
    readingMinutes: int
    publishedAt: Optional[str] = None
    updatedAt: Optional[str] = None
    edited: bool = False
    prevPost: Optional[PostLink] = None
    nextPost: Optional[PostLink] = None
    preview: bool = False
