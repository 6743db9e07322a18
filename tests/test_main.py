import pytest

from atto import config
from atto.__main__ import main, parseArgs


def test_defaults():
	options = parseArgs([])
	assert options.root == config.ROOT
	assert options.port == config.PORT
	assert options.listing == config.LISTING
	assert options.backlog == 1
	assert not options.concurrent
	assert not options.confine


def test_flags():
	options = parseArgs(["-p", "9000", "-L", "/srv"])
	assert options.port == 9000
	assert options.listing is False
	assert options.root == "/srv"
	options = parseArgs(["--port", "9001", "--no-listing", "--confine", "www"])
	assert (options.port, options.listing, options.confine) == (9001, False, True)
	assert options.root == "www"
	assert parseArgs(["--concurrent"]).concurrent


@pytest.mark.parametrize("flag", ["-h", "-?", "--help"])
def test_help(flag: str, capsys: pytest.CaptureFixture[str]):
	with pytest.raises(SystemExit) as e:
		parseArgs([flag])
	assert e.value.code == 0
	assert "--no-listing" in capsys.readouterr().out


@pytest.mark.parametrize(
	"args", [["--unknown"], ["-p"], ["--port", "http"], ["a", "b"]]
)
def test_invalid(args: list[str]):
	with pytest.raises(SystemExit) as e:
		parseArgs(args)
	assert e.value.code != 0


def test_main_setup_failure():
	assert main(["--host", "256.0.0.1", "-p", "0"]) == 1


# EOF
