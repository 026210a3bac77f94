import httpx

from spacetraveling.settings import settings


def get_prismic():
    """
    Open an HTTP client bound to the Prismic API endpoint.
    Called at runtime to avoid import-time connections.
    """
    client = httpx.Client(
        base_url=settings.PRISMIC_API_ENDPOINT,
        timeout=settings.PRISMIC_TIMEOUT_SECONDS,
    )
    try:
        yield client
    finally:
        client.close()
