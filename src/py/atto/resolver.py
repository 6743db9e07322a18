import os
import stat
from enum import Enum
from typing import NamedTuple

from .http.model import HTTPRequestError


class ResourceKind(Enum):
	Missing = 0
	File = 1
	Directory = 2
	Other = 3


class ResolvedResource(NamedTuple):
	"""A filesystem path and what was found there."""

	path: str
	kind: ResourceKind

	@property
	def hasTrailingSeparator(self) -> bool:
		return self.path.endswith("/")


class ResolverError(HTTPRequestError):
	"""Raised when querying the metadata of a path fails for any other
	reason than the path not existing."""

	def __init__(self, path: str, error: OSError | ValueError):
		# A `ValueError` is raised for paths that can't be passed to the OS,
		# like paths with an embedded NUL byte.
		self.errno: int | None = getattr(error, "errno", None)
		self.strerror: str | None = getattr(error, "strerror", None) or str(error)
		super().__init__(f"Failed to stat({path!r}): {self.strerror}", 500)
		self.path: str = path


def isContained(root: str, path: str) -> bool:
	"""Tells if the real location of `path` is within the real location of
	`root`."""
	base = os.path.realpath(root)
	return os.path.commonpath([base, os.path.realpath(path)]) == base


def classify(mode: int) -> ResourceKind:
	if stat.S_ISDIR(mode):
		return ResourceKind.Directory
	elif stat.S_ISREG(mode):
		return ResourceKind.File
	else:
		return ResourceKind.Other


def resolve(root: str, target: str, *, confine: bool = False) -> ResolvedResource:
	"""Resolves the `target` of a request relative to `root`. The path is the
	plain concatenation of both, so `..` segments are followed unless
	`confine` is set, in which case paths escaping `root` are classified as
	`Other`."""
	path: str = root + target
	try:
		st = os.stat(path)
	except FileNotFoundError:
		return ResolvedResource(path, ResourceKind.Missing)
	except (OSError, ValueError) as e:
		raise ResolverError(path, e) from e
	if confine and not isContained(root, path):
		return ResolvedResource(path, ResourceKind.Other)
	return ResolvedResource(path, classify(st.st_mode))


# EOF
