import argparse
import sys

from . import config
from .config import ServerConfig
from .server import run


def parseArgs(args: list[str]) -> ServerConfig:
	"""Parses the command line into a server configuration. Exits with status
	0 on `--help` and with a nonzero status on invalid arguments."""
	parser = argparse.ArgumentParser(
		prog="atto",
		description="Serves the files and directory listings of PATH over HTTP",
		formatter_class=argparse.ArgumentDefaultsHelpFormatter,
		add_help=False,
	)
	parser.add_argument(
		"-h",
		"-?",
		"--help",
		action="help",
		help="Show this message on stdout",
	)
	parser.add_argument(
		"-p",
		"--port",
		action="store",
		dest="port",
		type=int,
		metavar="PORT",
		help="Set port to listen on",
		default=config.PORT,
	)
	parser.add_argument(
		"-L",
		"--no-listing",
		action="store_false",
		dest="listing",
		help="Disable showing dir listing (show index.html instead)",
		default=config.LISTING,
	)
	parser.add_argument(
		"--host",
		action="store",
		dest="host",
		help="Set the address to bind to",
		default=config.HOST,
	)
	parser.add_argument(
		"--concurrent",
		action="store_true",
		dest="concurrent",
		help="Handle connections concurrently instead of one at a time",
	)
	parser.add_argument(
		"--confine",
		action="store_true",
		dest="confine",
		help="Forbid paths that resolve outside of PATH",
	)
	parser.add_argument(
		"path",
		metavar="PATH",
		nargs="?",
		help="Path to the directory you want to serve",
		default=config.ROOT,
	)
	options = parser.parse_args(args=args)
	return ServerConfig(
		root=options.path,
		port=options.port,
		listing=options.listing,
		host=options.host,
		concurrent=options.concurrent,
		confine=options.confine,
	)


def main(args: list[str] | None = None) -> int:
	return run(parseArgs(sys.argv[1:] if args is None else args))


if __name__ == "__main__":
	sys.exit(main())

# EOF
