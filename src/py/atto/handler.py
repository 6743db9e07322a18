from .config import INDEX, ServerConfig
from .http import render
from .http.model import HTTPRequestLine, HTTPResponse
from .http.parser import parseRequest
from .resolver import ResolvedResource, ResolverError, ResourceKind, resolve
from .utils.files import listdir
from .utils.logging import error, event, info

__doc__ = """
The connection handler pipeline: a received request is parsed, its target
resolved against the served directory, and exactly one response is rendered
for it.
"""


def read(path: str) -> bytes:
	with open(path, "rb") as f:
		return f.read()


def sendFile(path: str) -> HTTPResponse:
	try:
		content = read(path)
	except OSError as e:
		error(f"Failed to read file: {e.strerror}", "READ", Path=path)
		return render.internalError()
	return render.fileData(path, content)


def sendIndex(path: str) -> HTTPResponse:
	try:
		entries = listdir(path)
	except OSError as e:
		error(f"Failed to list directory: {e.strerror}", "LIST", Path=path)
		return render.internalError()
	return render.directoryIndex(path, entries)


def respondDirectory(
	request: HTTPRequestLine, resource: ResolvedResource, config: ServerConfig
) -> HTTPResponse:
	if not resource.hasTrailingSeparator:
		location: str = f"{request.path}/"
		info("Redirecting", Location=location)
		return render.redirect(location)
	elif config.listing:
		info("Sending index", Path=resource.path)
		return sendIndex(resource.path)
	else:
		index = resolve(
			config.root, f"{request.path}{INDEX}", confine=config.confine
		)
		if index.kind is ResourceKind.Missing:
			info("Sending not found", Path=index.path)
			return render.notFound()
		elif index.kind is ResourceKind.Other:
			# Reading from a FIFO or a device would block the server
			info("Sending forbidden", Path=index.path)
			return render.forbidden()
		else:
			info("Sending index file", Path=index.path)
			return sendFile(index.path)


def respond(request: HTTPRequestLine, config: ServerConfig) -> HTTPResponse:
	"""Returns the response to the given request."""
	if request.method != "GET":
		info("Bad method", Method=request.method, Path=request.path)
		return render.methodNotAllowed()
	try:
		resource = resolve(config.root, request.path, confine=config.confine)
		match resource.kind:
			case ResourceKind.Missing:
				info("Sending not found", Path=resource.path)
				return render.notFound()
			case ResourceKind.Directory:
				return respondDirectory(request, resource, config)
			case ResourceKind.File:
				info("Sending file", Path=resource.path)
				return sendFile(resource.path)
			case _:
				info("Sending forbidden", Path=resource.path)
				return render.forbidden()
	except ResolverError as e:
		error(e.message, "STAT", Path=e.path)
		return render.internalError()


def process(data: bytes, config: ServerConfig) -> HTTPResponse:
	"""Processes the raw bytes of a request into a response."""
	request = parseRequest(data)
	if config.logRequests:
		event(request.method or "?", request.path)
	return respond(request, config)


# EOF
