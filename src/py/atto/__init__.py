from .config import ServerConfig  # NOQA: F401
from .handler import process, respond  # NOQA: F401
from .http.model import HTTPRequestLine, HTTPResponse, HTTPRequestError  # NOQA: F401
from .resolver import ResolvedResource, ResourceKind, resolve  # NOQA: F401
from .server import run  # NOQA: F401


# EOF
