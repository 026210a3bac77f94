import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from spacetraveling import dependencies as deps
from spacetraveling.errors import FetchError
from spacetraveling.schemas.blog import PostsPage, PostView
from spacetraveling.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=PostsPage)
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get the first page of posts."""
    try:
        return service.first_page()
    except HTTPException:
        raise
    except FetchError as e:
        logger.error(f"Content source failed listing posts: {e}")
        raise HTTPException(status_code=502, detail="Failed to fetch content")
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.post("/posts/more", response_model=PostsPage)
def load_more_posts(
    current: PostsPage,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Append the next page to the posts the client already holds."""
    try:
        return service.load_more(current)
    except HTTPException:
        raise
    except FetchError as e:
        logger.error(f"Content source failed loading page {e.token}: {e}")
        raise HTTPException(status_code=502, detail="Failed to fetch content")
    except Exception as e:
        logger.error(f"Unexpected error loading more posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/paths", response_model=List[str])
def list_post_paths(service: PostsService = Depends(deps.get_posts_service)):
    """Uids of the posts to pre-render."""
    try:
        return service.list_paths()
    except HTTPException:
        raise
    except FetchError as e:
        logger.error(f"Content source failed listing paths: {e}")
        raise HTTPException(status_code=502, detail="Failed to fetch content")
    except Exception as e:
        logger.error(f"Unexpected error listing post paths: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{uid}", response_model=PostView)
def get_post(
    uid: str,
    ref: Optional[str] = None,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by uid, optionally from a preview ref."""
    try:
        post = service.get_post(uid, ref=ref)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except FetchError as e:
        logger.error(f"Content source failed retrieving post {uid}: {e}")
        raise HTTPException(status_code=502, detail="Failed to fetch content")
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {uid}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
