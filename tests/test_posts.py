import pytest

from spacetraveling.clients.prismic import PrismicError
from spacetraveling.services.posts import (
    detail_view,
    fetch_next_page,
    fetch_posts_page,
    get_post,
    list_post_uids,
    summary_view,
)


def test_fetch_posts_page(prismic_client):
    page = fetch_posts_page(prismic_client, page_size=2)
    assert [p.uid for p in page.results] == ["como-utilizar-hooks", "criando-um-app-cra-do-zero"]
    assert page.next_page is not None


def test_fetch_next_page(prismic_client):
    first = fetch_posts_page(prismic_client, page_size=2)
    second = fetch_next_page(prismic_client, first.next_page)
    assert [p.uid for p in second.results] == ["mapas-com-react"]
    assert second.next_page is None


def test_get_post(prismic_client):
    post = get_post(prismic_client, "como-utilizar-hooks")
    assert post.data.author == "Joseph Oliveira"
    assert len(post.data.content) == 2


def test_get_post_missing(prismic_client):
    assert get_post(prismic_client, "missing") is None


def test_list_post_uids_walks_pages(prismic_client):
    assert list_post_uids(prismic_client, page_size=1) == [
        "como-utilizar-hooks",
        "criando-um-app-cra-do-zero",
        "mapas-com-react",
    ]


def test_summary_view(prismic_client):
    post = get_post(prismic_client, "como-utilizar-hooks")
    assert summary_view(post) == {
        "uid": "como-utilizar-hooks",
        "title": "Como utilizar Hooks",
        "subtitle": "Subtitle of Como utilizar Hooks",
        "author": "Joseph Oliveira",
        "publication_date": "25 mar 2021",
    }


def test_summary_view_without_date(prismic_client):
    post = get_post(prismic_client, "mapas-com-react")
    assert summary_view(post)["publication_date"] == ""


def test_detail_view(prismic_client):
    post = get_post(prismic_client, "como-utilizar-hooks")
    view = detail_view(post)
    # first block: 3 heading words + 3 body tokens
    assert view["reading_time"] == "4 min"
    assert view["banner_url"] == "https://images.test/como-utilizar-hooks.png"
    assert view["sections"][1] == {
        "heading": "Cras laoreet",
        "html": "<p><strong>Nullam</strong> dolor sapien</p>",
    }


def test_documents_without_uid_are_skipped(prismic_client, prismic_api):
    prismic_api.posts[0]["uid"] = None
    page = fetch_posts_page(prismic_client, page_size=2)
    assert [p.uid for p in page.results] == ["criando-um-app-cra-do-zero"]


def test_malformed_document_raises_prismic_error(prismic_client, prismic_api):
    prismic_api.posts[1]["data"]["content"] = "not a list"
    with pytest.raises(PrismicError):
        fetch_posts_page(prismic_client, page_size=2)
    with pytest.raises(PrismicError):
        get_post(prismic_client, "criando-um-app-cra-do-zero")
