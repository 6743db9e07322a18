from ..utils.files import DirEntry, contentType
from ..utils.htmpl import H, Node, html, raw
from .model import HTTPResponse

__doc__ = """
Renders the fixed set of responses the server sends. Error responses share
one envelope: the status line, the base headers and a blank line, with no
body. Successful responses carry their `Content-Type` and the exact
`Content-Length` of their body.
"""

HTML_CONTENT_TYPE: str = "text/html"


def ok(content: bytes | str, contentType: str) -> HTTPResponse:
	return HTTPResponse.Create(200, content, contentType=contentType)


def fileData(path: str, content: bytes) -> HTTPResponse:
	"""A file response, typed after the file's extension."""
	return ok(content, contentType(path))


def redirect(location: str) -> HTTPResponse:
	return HTTPResponse.Create(303, headers={"Location": location})


def forbidden() -> HTTPResponse:
	return HTTPResponse.Create(403)


def notFound() -> HTTPResponse:
	return HTTPResponse.Create(404)


def methodNotAllowed() -> HTTPResponse:
	return HTTPResponse.Create(405)


def internalError() -> HTTPResponse:
	return HTTPResponse.Create(500)


def entryNode(entry: DirEntry) -> Node:
	name: str = f"{entry.name}/" if entry.isDirectory else entry.name
	return H.li(H.a(name, href=f"./{name}"))


def directoryIndex(path: str, entries: list[DirEntry]) -> HTTPResponse:
	"""Renders the listing of the directory at `path`, with one link per
	entry, in the order given. The path is embedded as-is in the title and
	heading."""
	document: list[Node] = [
		H.head(
			H.meta(charset="utf-8"),
			H.meta(
				name="viewport",
				content="width=device-width, initial-scale=1.0",
			),
			H.title("Index of ", raw(path)),
		),
		H.body(
			H.h1("Index of ", raw(path)),
			H.ul(*(entryNode(_) for _ in entries)),
		),
	]
	return ok("".join(html(*document)), HTML_CONTENT_TYPE)


# EOF
