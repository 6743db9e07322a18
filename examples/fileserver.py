"""
Static File Server Example

Serves the current directory, showing the `index.html` of directories
instead of their listing.

Usage:
    python fileserver.py

Test with:
    http://localhost:8080/           # The index.html of the current directory
    http://localhost:8080/README.md  # Serve specific file
"""

import sys

from atto import ServerConfig, run
from atto.utils.logging import info

if __name__ == "__main__":
	info("Starting static file server")
	sys.exit(run(ServerConfig(root=".", listing=False)))

# EOF
