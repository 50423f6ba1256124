"""Static pages and error handling."""


def test_privacy_page_is_public(client):
    resp = client.get("/privacy")
    assert resp.status_code == 200
    assert b"Privacy Policy" in resp.data


def test_unknown_route_renders_error_page(client):
    resp = client.get("/no/such/page")
    assert resp.status_code == 404
    assert b"Error 404" in resp.data


def test_login_page_renders_both_forms(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert b'action="/users/create"' in resp.data
    assert b'action="/login"' in resp.data
