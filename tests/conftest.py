import os

os.environ["PRISMIC_API_ENDPOINT"] = "https://blog.test/api/v2"
os.environ["PRISMIC_ACCESS_TOKEN"] = ""
os.environ["STATIC_OUTPUT_DIR"] = ""
os.environ["POSTS_PAGE_SIZE"] = "2"

import copy
import re
from urllib.parse import urlencode

import httpx
import pytest

from spacetraveling.clients.prismic import PrismicClient
from spacetraveling.deps import get_prismic_client
from spacetraveling.main import app

from fastapi.testclient import TestClient

ENDPOINT = "https://blog.test/api/v2"
MASTER_REF = "master-ref-1"


def make_post(uid, title, words=3, published="2021-03-25T19:25:28+0000"):
    return {
        "id": f"id-{uid}",
        "uid": uid,
        "type": "post",
        "first_publication_date": published,
        "last_publication_date": published,
        "data": {
            "title": title,
            "subtitle": f"Subtitle of {title}",
            "author": "Joseph Oliveira",
            "banner": {"url": f"https://images.test/{uid}.png"},
            "content": [
                {
                    "heading": "Proin et varius",
                    "body": [
                        {"type": "paragraph", "text": " ".join(["lorem"] * words), "spans": []},
                    ],
                },
                {
                    "heading": "Cras laoreet",
                    "body": [
                        {
                            "type": "paragraph",
                            "text": "Nullam dolor sapien",
                            "spans": [{"start": 0, "end": 6, "type": "strong"}],
                        },
                    ],
                },
            ],
        },
    }


POSTS = [
    make_post("como-utilizar-hooks", "Como utilizar Hooks"),
    make_post("criando-um-app-cra-do-zero", "Criando um app CRA do zero"),
    make_post("mapas-com-react", "Mapas com React usando Leaflet", published=None),
]


class FakePrismicAPI:
    """Serves a tiny Prismic repository through httpx.MockTransport."""

    def __init__(self, posts):
        self.posts = posts
        self.requests = []
        self.fail = False
        self.fail_page = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail or (
            self.fail_page and request.url.params.get("page") == str(self.fail_page)
        ):
            return httpx.Response(503, text="unavailable")

        path = request.url.path
        if path == "/api/v2":
            return httpx.Response(
                200, json={"refs": [{"id": "master", "ref": MASTER_REF, "isMasterRef": True}]}
            )
        if path == "/api/v2/documents/search":
            return httpx.Response(200, json=self._search(request))
        return httpx.Response(404, json={"message": "not found"})

    def _search(self, request):
        params = request.url.params
        q = params.get("q", "")
        page = int(params.get("page", "1"))
        size = int(params.get("pageSize", "20"))

        uid = re.search(r'my\.post\.uid, "([^"]*)"', q)
        if uid:
            matches = [p for p in self.posts if p["uid"] == uid.group(1)]
        else:
            matches = list(self.posts)

        start = (page - 1) * size
        results = matches[start:start + size]
        next_page = None
        if start + size < len(matches):
            query = {k: v for k, v in params.items() if k != "page"}
            query["page"] = page + 1
            next_page = f"{ENDPOINT}/documents/search?{urlencode(query)}"
        return {
            "page": page,
            "results_per_page": size,
            "total_results_size": len(matches),
            "next_page": next_page,
            "results": results,
        }


@pytest.fixture
def prismic_api():
    return FakePrismicAPI(copy.deepcopy(POSTS))


@pytest.fixture
def prismic_client(prismic_api):
    client = PrismicClient(ENDPOINT, transport=httpx.MockTransport(prismic_api))
    yield client
    client.close()


@pytest.fixture
def client(prismic_client):
    app.dependency_overrides[get_prismic_client] = lambda: prismic_client

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
