from os import getenv
from typing import NamedTuple

PORT: int = int(getenv("PORT", 8080))

# The server is meant to be reachable from everywhere by default
HOST: str = getenv("HOST", "0.0.0.0")  # nosec: B104

ROOT: str = getenv("ATTO_ROOT", ".")

LISTING: bool = getenv("ATTO_LISTING", "1") == "1"

LOG_REQUESTS: bool = getenv("ATTO_LOG_REQUESTS", "1") == "1"

# The directory index served when listings are disabled
INDEX: str = "index.html"


class ServerConfig(NamedTuple):
	"""The server configuration, built once at startup and never mutated."""

	root: str = ROOT
	port: int = PORT
	listing: bool = LISTING
	host: str = HOST
	# Number of pending connections before new ones are refused
	backlog: int = 1
	# Requests are received in a single read of at most this size
	readsize: int = 1_024
	# Handles each connection in its own task instead of one at a time
	concurrent: bool = False
	# Paths that resolve outside of `root` are forbidden
	confine: bool = False
	logRequests: bool = LOG_REQUESTS


# EOF
