from typing import NamedTuple

from .status import HTTP_STATUS

PROTOCOL: str = "HTTP/1.1"
SERVER: str = "Atto Http Server"
ENCODING: str = "utf8"

# -----------------------------------------------------------------------------
#
# HELPERS
#
# -----------------------------------------------------------------------------


def headername(name: str, *, headers: dict[str, str] = {}) -> str:
	"""Normalizes the header name as `Kebab-Case`."""
	if name in headers:
		return headers[name]
	key: str = name.lower()
	if key in headers:
		return headers[key]
	else:
		normalized: str = "-".join(_.capitalize() for _ in name.split("-"))
		headers[key] = normalized
		return normalized


def baseHeaders() -> dict[str, str]:
	"""Returns the headers every response starts with."""
	return {
		"Server": SERVER,
		"Access-Control-Allow-Origin": "*",
	}


# -----------------------------------------------------------------------------
#
# ERRORS
#
# -----------------------------------------------------------------------------


class HTTPRequestError(Exception):
	"""Raised while processing a request, to generate an error response."""

	def __init__(self, message: str, status: int = 500):
		super().__init__(message)
		self.message: str = message
		self.status: int = status


# -----------------------------------------------------------------------------
#
# REQUESTS
#
# -----------------------------------------------------------------------------


class HTTPRequestLine(NamedTuple):
	"""Represents a request line, as `METHOD TARGET PROTOCOL`. The target is
	kept as sent, without any decoding, and the protocol is not validated."""

	method: str
	path: str
	protocol: str


# -----------------------------------------------------------------------------
#
# RESPONSE
#
# -----------------------------------------------------------------------------


class HTTPResponse:
	"""An HTTP response, with its complete body."""

	__slots__ = ["protocol", "status", "message", "headers", "body"]

	@staticmethod
	def Create(
		status: int = 200,
		content: bytes | str | None = None,
		contentType: str | None = None,
		headers: dict[str, str] | None = None,
		protocol: str = PROTOCOL,
	) -> "HTTPResponse":
		"""Factory method to create HTTP response objects, which always carry
		the base headers."""
		res_headers: dict[str, str] = baseHeaders()
		payload: bytes = b""
		if isinstance(content, str):
			payload = content.encode(ENCODING, "surrogateescape")
		elif content is not None:
			payload = content
		if contentType is not None:
			res_headers["Content-Type"] = contentType
			res_headers["Content-Length"] = str(len(payload))
		if headers:
			res_headers.update({headername(k): v for k, v in headers.items()})
		return HTTPResponse(
			protocol=protocol,
			status=status,
			message=HTTP_STATUS.get(status, "Unknown status"),
			headers=res_headers,
			body=payload,
		)

	def __init__(
		self,
		protocol: str,
		status: int,
		message: str,
		headers: dict[str, str],
		body: bytes = b"",
	):
		self.protocol: str = protocol
		self.status: int = status
		self.message: str = message
		self.headers: dict[str, str] = headers
		self.body: bytes = body

	def getHeader(self, name: str) -> str | None:
		return self.headers.get(headername(name))

	def head(self) -> bytes:
		"""Serializes the status line and headers, including the blank line
		that terminates them."""
		lines: list[str] = [f"{self.protocol} {self.status} {self.message}"]
		lines += [f"{k}: {v}" for k, v in self.headers.items()]
		lines.append("")
		lines.append("")
		# NOTE: Header values may hold paths from the request line, which
		# are encoded back to their original bytes.
		return "\r\n".join(lines).encode(ENCODING, "surrogateescape")

	def payload(self) -> bytes:
		"""The full response, as sent on the wire."""
		return self.head() + self.body

	def __str__(self) -> str:
		return f"Response({self.protocol} {self.status} {self.message} {self.headers} {len(self.body)}B)"


# EOF
