from fastapi import Depends

from spacetraveling.db.prismic import get_prismic
from spacetraveling.repos.prismic_repo import PrismicPostsRepo
from spacetraveling.services.posts_service import PostsService
from spacetraveling.settings import settings


def get_posts_repo(client=Depends(get_prismic)):
    return PrismicPostsRepo(client, access_params=settings.prismic_params)


def get_posts_service(repo=Depends(get_posts_repo)):
    return PostsService(
        repo=repo,
        words_per_minute=settings.WORDS_PER_MINUTE,
        page_size=settings.POSTS_PAGE_SIZE,
        paths_page_size=settings.STATIC_PATHS_PAGE_SIZE,
    )
