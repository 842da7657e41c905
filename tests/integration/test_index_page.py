from fastapi.testclient import TestClient

from basic_auth_demo.gate import Credential
from main import create_app


def test_index_page_served(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert '<code id="userNameCode">tom</code>' in response.text
    assert '<code id="passwordCode">1234</code>' in response.text
    assert 'data-protected-path="/api/data"' in response.text


def test_index_page_needs_no_credentials(client):
    assert "www-authenticate" not in client.get("/").headers


def test_index_page_escapes_values():
    app = create_app(credential=Credential(identity="<b>", secret='"&'), protected_path="/api/data")
    html = TestClient(app).get("/").text

    assert '<code id="userNameCode">&lt;b&gt;</code>' in html
    assert "&#34;&amp;" in html or "&quot;&amp;" in html
    assert "{{" not in html


def test_page_script_sends_utf8_header(client):
    html = client.get("/").text

    # Same encoding as auth.utils.build_basic_authorization and the gate's decoder
    assert "new TextEncoder().encode(user + ':' + secret)" in html
    assert "btoa(String.fromCharCode(...bytes))" in html
    assert "btoa(userName" not in html


def test_page_script_builds_header_inside_try(client):
    html = client.get("/").text

    assert html.index("try {") < html.index("buildHeaders()")
    assert html.index("buildHeaders()") < html.index("catch (error)")
