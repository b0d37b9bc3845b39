import json
import threading
import urllib.error
import urllib.request

import pytest

from filescout.server import make_server, search_results


@pytest.fixture
def frontend(tmp_path):
    (tmp_path / "index.html").write_text("<h1>home</h1>")
    (tmp_path / "app.js").write_text("console.log(1);")
    return tmp_path


def _start(directory):
    server = make_server(directory, "127.0.0.1", 0)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    return server, thread


@pytest.fixture
def base_url(frontend):
    server, thread = _start(frontend)
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()
    thread.join()


def test_search_results_content():
    results = search_results()
    assert results[0]["Filename"] == "test1.txt"
    assert results[0]["Path"] == "/files/test1.txt"


def test_search_endpoint_returns_json(base_url):
    with urllib.request.urlopen(base_url + "/api/search") as response:
        assert response.headers["Content-Type"] == "application/json"
        assert response.headers["Access-Control-Allow-Origin"] == "*"
        assert json.loads(response.read()) == search_results()


def test_search_endpoint_post(base_url):
    request = urllib.request.Request(base_url + "/api/search", data=b"{}", method="POST")
    with urllib.request.urlopen(request) as response:
        assert json.loads(response.read()) == search_results()


def test_preflight_has_empty_body(base_url):
    request = urllib.request.Request(base_url + "/api/search", method="OPTIONS")
    with urllib.request.urlopen(request) as response:
        assert response.status == 200
        assert response.headers["Access-Control-Allow-Methods"] == "GET, POST, OPTIONS"
        assert response.read() == b""


def test_root_serves_index(base_url):
    with urllib.request.urlopen(base_url + "/") as response:
        assert response.read() == b"<h1>home</h1>"


def test_static_file(base_url):
    with urllib.request.urlopen(base_url + "/app.js") as response:
        assert response.read() == b"console.log(1);"


def test_missing_index_is_not_found(tmp_path):
    server, thread = _start(tmp_path)
    try:
        url = f"http://127.0.0.1:{server.server_address[1]}/"
        with pytest.raises(urllib.error.HTTPError) as info:
            urllib.request.urlopen(url)
        assert info.value.code == 404
    finally:
        server.shutdown()
        server.server_close()
        thread.join()