import logging

from fastapi import Depends, FastAPI

from spacetraveling.routers import posts
from spacetraveling.security import get_api_key
from spacetraveling.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Spacetraveling API",
    description="Posts, pagination and reading time for the spacetraveling blog",
)

app.include_router(posts.router, dependencies=[Depends(get_api_key)])
logger.info(f"Serving posts from {settings.PRISMIC_API_ENDPOINT}")


@app.get("/")
async def root():
    return {"message": "Spacetraveling API is running"}
