from pathlib import Path

import pytest

from atto.config import ServerConfig


@pytest.fixture
def tree(tmp_path: Path) -> Path:
	"""A small directory tree to serve."""
	(tmp_path / "a.txt").write_bytes(b"hi")
	(tmp_path / "page.html").write_bytes(b"<p>page</p>")
	(tmp_path / "style.css").write_bytes(b"p{}")
	(tmp_path / "README").write_bytes(b"readme")
	(tmp_path / "sub").mkdir()
	(tmp_path / "listing").mkdir()
	(tmp_path / "listing" / "f1.txt").write_bytes(b"one")
	(tmp_path / "listing" / "d1").mkdir()
	(tmp_path / "site").mkdir()
	(tmp_path / "site" / "index.html").write_bytes(b"<h1>Welcome</h1>")
	return tmp_path


@pytest.fixture
def config(tree: Path) -> ServerConfig:
	return ServerConfig(root=str(tree), logRequests=False)


# EOF
