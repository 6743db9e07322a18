import os
from pathlib import Path
from typing import NamedTuple

DEFAULT_CONTENT_TYPE: str = "text/plain"

# Looked up by the last dot-separated suffix of a file name, in order and
# case-sensitive.
MIME_TYPES: dict[str, str] = {
	"html": "text/html",
	"css": "text/css",
	"js": "text/javascript",
	"png": "image/png",
	"jpg": "image/jpg",
	"bmp": "image/bmp",
}


def extension(path: Path | str) -> str | None:
	"""Returns the last dot-separated suffix of the path's file name, or
	`None` when the name has no dot."""
	name = os.path.basename(str(path))
	i = name.rfind(".")
	return None if i == -1 else name[i + 1 :]


def contentType(path: Path | str) -> str:
	"""Returns the content type for the given path, defaulting to `text/plain`."""
	ext = extension(path)
	return (
		MIME_TYPES.get(ext, DEFAULT_CONTENT_TYPE)
		if ext is not None
		else DEFAULT_CONTENT_TYPE
	)


class DirEntry(NamedTuple):
	"""An entry of a directory listing."""

	name: str
	isDirectory: bool = False


def listdir(path: Path | str) -> list[DirEntry]:
	"""Lists the direct children of `path` in filesystem enumeration order,
	preceded by the `.` and `..` entries."""
	entries: list[DirEntry] = [DirEntry(".", True), DirEntry("..", True)]
	with os.scandir(path) as it:
		for _ in it:
			try:
				is_dir = _.is_dir()
			except OSError:
				is_dir = False
			entries.append(DirEntry(_.name, is_dir))
	return entries


# EOF
