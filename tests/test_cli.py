import pytest

from mazecore.cli import build_parser, main, settings_from_args


def test_settings_from_args() -> None:
    args = build_parser().parse_args(["--difficulty", "30", "--width", "5", "--ignore-walls", "--no-exit"])
    s = settings_from_args(args)
    assert (s.width, s.height) == (5, 18)
    assert s.respect_walls is False
    assert s.exit_opening is False
    assert s.max_arrows == 10


def test_main_prints_map(capsys) -> None:
    assert main(["--width", "4", "--height", "3", "--seed", "1", "--full-path"]) == 0
    out = capsys.readouterr().out.splitlines()

    assert len(out) == 3 * 2 + 1 + 1
    assert all(len(line) == 4 * 2 + 1 for line in out[:7])
    assert out[-1].startswith("route to exit: ")


def test_main_rejects_bad_size(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--width", "0"])
    assert exc.value.code == 2
    assert "dimensions" in capsys.readouterr().err
