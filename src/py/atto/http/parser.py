from .model import HTTPRequestLine

# Same set as C's `isspace`, which is also what `bytes.isspace` uses.
WHITESPACE: frozenset[int] = frozenset(b" \t\n\v\f\r")

# Request lines are decoded the way the filesystem decodes names, so that any
# byte sequence round-trips unchanged to `os.stat` and to response headers.
REQUEST_ENCODING: str = "utf8"
REQUEST_ERRORS: str = "surrogateescape"


def parseWord(data: bytes, offset: int = 0) -> tuple[bytes, int]:
	"""Parses the word starting at `offset`, skipping any leading whitespace.
	Returns the word and the offset right after the whitespace that ended it
	(or the end of the data). A NUL byte ends the data, like a C string."""
	n: int = data.find(0)
	if n == -1:
		n = len(data)
	i: int = offset
	while i < n and data[i] in WHITESPACE:
		i += 1
	j: int = i
	while j < n and data[j] not in WHITESPACE:
		j += 1
	return data[i:j], min(j + 1, n)


def parseRequest(data: bytes) -> HTTPRequestLine:
	"""Parses the method, target and protocol of a request. This never fails:
	truncated or malformed input yields empty or partial tokens."""
	method, offset = parseWord(data)
	path, offset = parseWord(data, offset)
	# The protocol is parsed but never validated
	protocol, offset = parseWord(data, offset)
	return HTTPRequestLine(
		method.decode(REQUEST_ENCODING, REQUEST_ERRORS),
		path.decode(REQUEST_ENCODING, REQUEST_ERRORS),
		protocol.decode(REQUEST_ENCODING, REQUEST_ERRORS),
	)


# EOF
