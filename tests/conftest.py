import datetime

import httpx

from spacetraveling.schemas.blog import PageResult, PostSummary

API_ROOT = "https://spacetraveling.cdn.prismic.io/api/v2"
MASTER_REF = "master-ref"


def make_summary(uid: str, published: datetime.datetime | None = None, **fields):
    return PostSummary(uid=uid, first_publication_date=published, **fields)


def make_doc(
    uid,
    doc_id=None,
    first="2021-03-25T19:25:28+0000",
    last=None,
    **data,
) -> dict:
    """Raw CMS document, shaped like a Prismic search result."""
    return {
        "id": doc_id or f"id-{uid}",
        "uid": uid,
        "type": "posts",
        "first_publication_date": first,
        "last_publication_date": last or first,
        "data": data,
    }


class FakePrismic:
    """
    httpx.MockTransport handler imitating the Prismic REST API.
    `search` receives the request query params and returns the JSON body.
    """

    def __init__(self, search=None, refs=None):
        self.search = search or (lambda params: {"results": [], "next_page": None})
        self.refs = (
            refs
            if refs is not None
            else [{"id": "master", "ref": MASTER_REF, "isMasterRef": True}]
        )
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.rstrip("/")
        if path == "/api/v2":
            return httpx.Response(200, json={"refs": self.refs})
        if path == "/api/v2/documents/search":
            return httpx.Response(200, json=self.search(request.url.params))
        return httpx.Response(404, json={"message": "not found"})

    @property
    def search_requests(self):
        return [r for r in self.requests if r.url.path.endswith("/documents/search")]


def make_client(handler, **kwargs) -> httpx.Client:
    return httpx.Client(
        base_url=API_ROOT, transport=httpx.MockTransport(handler), **kwargs
    )


class FakeRepo:
    """
    Minimal content-source stand-in used in service tests.
    A page mapped to an exception makes fetch_page raise it.
    """

    def __init__(
        self,
        first_page=None,
        pages=None,
        details=None,
        neighbors=None,
        uids=None,
    ):
        self.first_page = first_page or PageResult()
        self.pages = pages or {}
        self.details = details or {}
        self.neighbors = neighbors or {}
        self.uids = uids or []
        self.calls = []

    def fetch_first_page(self, page_size):
        self.calls.append(("first", page_size))
        return self.first_page

    def fetch_page(self, token):
        self.calls.append(("page", token))
        result = self.pages[token]
        if isinstance(result, Exception):
            raise result
        return result

    def fetch_detail(self, uid, ref=None):
        self.calls.append(("detail", uid, ref))
        return self.details.get(uid)

    def fetch_neighbor(self, document_id, newest_first):
        self.calls.append(("neighbor", document_id, newest_first))
        return self.neighbors.get(newest_first)

    def list_uids(self, page_size):
        self.calls.append(("uids", page_size))
        return self.uids[:page_size]


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(
        self,
        first_page_return=None,
        load_more_return=None,
        get_post_return=None,
        paths_return=None,
    ):
        self._first_page_return = first_page_return or {"results": []}
        self._load_more_return = load_more_return
        self._get_post_return = get_post_return
        self._paths_return = paths_return or []
        self.calls = []

    def first_page(self):
        return self._first_page_return

    def load_more(self, current):
        self.calls.append(current)
        return self._load_more_return or current

    def get_post(self, uid: str, ref=None):
        self.calls.append((uid, ref))
        return self._get_post_return

    def list_paths(self):
        return self._paths_return
