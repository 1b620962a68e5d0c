"""Frontend — index page and static assets, with API route misses kept as 404.

Invariants:
    - GET / serves the single-page index, whose script is under /static
    - The static mount never answers for unmatched API paths (no 405s)
"""

import pytest


async def test_index_page_served(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/html")
    assert 'id="tweets-container"' in res.text
    assert "/static/js/index.js" in res.text


async def test_static_script_served(client):
    res = await client.get("/static/js/index.js")
    assert res.status_code == 200
    assert "/log-in" in res.text


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
async def test_non_numeric_id_is_404_for_every_method(client, method):
    res = await client.request(method, "/tweets/abc", json={"message": "x"})
    assert res.status_code == 404
    assert res.json()["title"] == "Resource Not Found"


async def test_unknown_path_is_404(client):
    res = await client.post("/nowhere", json={})
    assert res.status_code == 404
