import os
from pathlib import Path

import pytest

from atto import handler
from atto.config import ServerConfig
from atto.handler import process


def get(path: str, config: ServerConfig, method: str = "GET"):
	return process(f"{method} {path} HTTP/1.1\r\nHost: localhost\r\n\r\n".encode(), config)


def test_file(config: ServerConfig):
	res = get("/a.txt", config)
	assert res.status == 200
	assert res.body == b"hi"
	assert res.getHeader("Content-Type") == "text/plain"
	assert res.getHeader("Content-Length") == "2"
	assert res.getHeader("Server") == "Atto Http Server"
	assert res.getHeader("Access-Control-Allow-Origin") == "*"


def test_file_content_types(config: ServerConfig):
	assert get("/page.html", config).getHeader("Content-Type") == "text/html"
	assert get("/style.css", config).getHeader("Content-Type") == "text/css"
	assert get("/README", config).getHeader("Content-Type") == "text/plain"


def test_file_body_is_byte_identical(tree: Path, config: ServerConfig):
	data = bytes(range(256)) * 64
	(tree / "blob.bin").write_bytes(data)
	res = get("/blob.bin", config)
	assert res.body == data
	assert res.getHeader("Content-Length") == str(len(data))


def test_missing(config: ServerConfig):
	res = get("/missing", config)
	assert res.status == 404
	assert res.body == b""
	assert res.getHeader("Content-Length") is None


def test_directory_redirect(config: ServerConfig):
	res = get("/sub", config)
	assert res.status == 303
	assert res.getHeader("Location") == "/sub/"
	assert res.body == b""


def test_nested_directory_redirect(config: ServerConfig):
	assert get("/listing/d1", config).getHeader("Location") == "/listing/d1/"


def test_directory_listing(config: ServerConfig):
	res = get("/listing/", config)
	assert res.status == 200
	assert res.getHeader("Content-Type") == "text/html"
	assert res.body.count(b'href="./f1.txt"') == 1
	assert res.body.count(b'href="./d1/"') == 1
	assert b">d1/</a>" in res.body
	assert b">f1.txt</a>" in res.body


def test_empty_directory_listing(tree: Path, config: ServerConfig):
	res = get("/sub/", config)
	assert res.status == 200
	assert res.body.count(b"<li>") == 2
	assert f"Index of {tree}/sub/".encode() in res.body


def test_root_listing(config: ServerConfig):
	res = get("/", config)
	assert res.status == 200
	for name in (b"a.txt", b"page.html", b"sub/", b"listing/", b"site/"):
		assert res.body.count(b'href="./' + name + b'"') == 1


def test_index_fallback(config: ServerConfig):
	config = config._replace(listing=False)
	res = get("/site/", config)
	assert res.status == 200
	assert res.body == b"<h1>Welcome</h1>"
	assert res.payload() == get("/site/index.html", config).payload()


def test_index_fallback_missing(config: ServerConfig):
	res = get("/sub/", config._replace(listing=False))
	assert res.status == 404


def test_index_fallback_still_redirects(config: ServerConfig):
	res = get("/site", config._replace(listing=False))
	assert res.status == 303
	assert res.getHeader("Location") == "/site/"


def test_index_fallback_stat_error(tree: Path, config: ServerConfig):
	(tree / "loop").mkdir()
	(tree / "loop" / "index.html").symlink_to("index.html")
	assert get("/loop/", config._replace(listing=False)).status == 500


def test_index_fallback_is_directory(tree: Path, config: ServerConfig):
	(tree / "nested").mkdir()
	(tree / "nested" / "index.html").mkdir()
	assert get("/nested/", config._replace(listing=False)).status == 500


def test_method_not_allowed(config: ServerConfig):
	for method in ("POST", "HEAD", "PUT", "DELETE", "get"):
		res = get("/a.txt", config, method)
		assert res.status == 405
		assert res.body == b""


def test_method_not_allowed_skips_filesystem(
	config: ServerConfig, monkeypatch: pytest.MonkeyPatch
):
	def fail(*args, **kwargs):
		raise AssertionError("The filesystem should not be queried")

	monkeypatch.setattr(handler, "resolve", fail)
	assert get("/a.txt", config, "POST").status == 405


def test_metadata_error(config: ServerConfig):
	res = get("/a.txt/child", config)
	assert res.status == 500
	assert res.body == b""


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="Requires FIFOs")
def test_other_kind(tree: Path, config: ServerConfig):
	os.mkfifo(tree / "pipe")
	assert get("/pipe", config).status == 403


@pytest.mark.skipif(
	not hasattr(os, "geteuid") or os.geteuid() == 0,
	reason="Permissions are not enforced for root",
)
def test_unreadable_file(tree: Path, config: ServerConfig):
	path = tree / "secret.txt"
	path.write_bytes(b"secret")
	path.chmod(0)
	try:
		assert get("/secret.txt", config).status == 500
	finally:
		path.chmod(0o644)


def test_traversal(tree: Path):
	config = ServerConfig(root=str(tree / "sub"), logRequests=False)
	assert get("/../a.txt", config).status == 200
	assert get("/../a.txt", config._replace(confine=True)).status == 403


def test_malformed_requests(config: ServerConfig):
	assert process(b"", config).status == 405
	assert process(b"\r\n\r\n", config).status == 405
	# A bare method resolves the root itself, which lacks the trailing
	# separator.
	res = process(b"GET", config)
	assert res.status == 303
	assert res.getHeader("Location") == "/"


def test_nul_in_target(config: ServerConfig):
	res = process(b"GET /a.txt\x00junk HTTP/1.1\r\n\r\n", config)
	assert res.status == 200
	assert res.body == b"hi"


def test_idempotent(config: ServerConfig):
	for path in ("/a.txt", "/listing/", "/sub", "/missing"):
		assert get(path, config).payload() == get(path, config).payload()


# EOF
