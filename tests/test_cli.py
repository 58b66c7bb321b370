import os
import sys

import pytest

from yegonesh import __version__
from yegonesh.cli import main, own_args
from yegonesh.errors import (
    EXIT_CODE_CORRUPT_HISTORY,
    EXIT_CODE_LAUNCH_FAILED,
    EXIT_CODE_SELECTOR_FAILED,
)

PICK_FIRST = "import sys; print(sys.stdin.readline().strip())"


def environ_for(tmp_path, search_path):
    return {"PATH": search_path, "HOME": str(tmp_path), "XDG_CONFIG_HOME": str(tmp_path / "cfg")}


def test_own_args_stops_at_separator():
    assert own_args(["-v", "--", "-b"]) == ["-v"]
    assert own_args(["--selector", "rofi"]) == ["--selector", "rofi"]


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"], {})
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_main_launches_and_records(tmp_path, make_bin):
    bin_dir = make_bin({"true": 0o755})
    (bin_dir / "true").write_text("#!/bin/sh\nexit 0\n")
    environ = environ_for(tmp_path, str(bin_dir))

    code = main(["--selector", sys.executable, "--", "-c", PICK_FIRST], environ)

    assert code == 0
    history = tmp_path / "cfg" / "yegonesh" / "history.tsv"
    assert history.read_text() == "1\ttrue\n"


def test_main_corrupt_history(tmp_path, make_bin, capsys):
    environ = environ_for(tmp_path, str(make_bin(["vim"])))
    history = tmp_path / "cfg" / "yegonesh" / "history.tsv"
    history.parent.mkdir(parents=True)
    history.write_text("lots\tvim\n")

    code = main(["--selector", sys.executable, "--", "-c", PICK_FIRST], environ)

    assert code == EXIT_CODE_CORRUPT_HISTORY
    assert "Corrupt history record" in capsys.readouterr().err
    assert history.read_text() == "lots\tvim\n"


def test_main_missing_selector(tmp_path, make_bin, capsys):
    environ = environ_for(tmp_path, str(make_bin(["vim"])))

    code = main(["--selector", "yegonesh-no-such-selector"], environ)

    assert code == EXIT_CODE_SELECTOR_FAILED
    assert "Unable to start selector" in capsys.readouterr().err


PICK_FIRST_RAW = "import sys; sys.stdout.buffer.write(sys.stdin.buffer.readline())"


def test_main_handles_undecodable_executable_names(tmp_path, make_bin):
    bin_dir = make_bin(["vim"])
    odd = bin_dir / os.fsdecode(b"caf\xe9")
    odd.write_text("#!/bin/sh\nexit 0\n")
    os.chmod(odd, 0o755)
    environ = environ_for(tmp_path, str(bin_dir))

    code = main(["--selector", sys.executable, "--", "-c", PICK_FIRST_RAW], environ)

    assert code == 0
    history = tmp_path / "cfg" / "yegonesh" / "history.tsv"
    assert history.read_bytes() == b"1\tcaf\xe9\n"


def test_usage_error_code_differs_from_launcher_codes(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--no-such-option"], {})
    assert excinfo.value.code == 2
    assert excinfo.value.code not in (
        EXIT_CODE_CORRUPT_HISTORY, EXIT_CODE_LAUNCH_FAILED, EXIT_CODE_SELECTOR_FAILED,
    )
