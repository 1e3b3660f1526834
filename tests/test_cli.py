# tests/test_cli.py
import pytest

from color_tween.cli import main


def test_convert_defaults_to_rgb(capsys):
    assert main(["convert", "#f00"]) == 0
    assert capsys.readouterr().out == "rgb(255,0,0)\n"


def test_convert_in_hsl_mode(capsys):
    assert main(["--mode", "hsl", "convert", "#f00"]) == 0
    assert capsys.readouterr().out == "hsl(0,100%,50%)\n"


def test_tween_prints_evenly_spaced_steps(capsys):
    assert main(["tween", "rgb(0,0,0)", "rgb(100,200,50)", "--steps", "3"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "0.00\trgb(0,0,0)",
        "0.50\trgb(50,100,25)",
        "1.00\trgb(100,200,50)",
    ]


def test_tween_single_step_prints_start(capsys):
    assert main(["tween", "#000", "#fff", "--steps", "1"]) == 0
    assert capsys.readouterr().out.splitlines() == ["0.00\trgb(0,0,0)"]


def test_unreadable_color_exits_with_error(capsys):
    assert main(["convert", "notacolor"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "notacolor" in captured.err


def test_tween_with_unreadable_end(capsys):
    assert main(["tween", "#000", "bogus"]) == 1
    assert "bogus" in capsys.readouterr().err


def test_mode_from_config_file(tmp_path, capsys):
    path = tmp_path / "config.yaml"
    path.write_text("mode: hsl\n")
    assert main(["--config", str(path), "convert", "rgb(0,0,255)"]) == 0
    assert capsys.readouterr().out == "hsl(240,100%,50%)\n"


def test_mode_flag_overrides_config_file(tmp_path, capsys):
    path = tmp_path / "config.yaml"
    path.write_text("mode: hsl\n")
    assert main(["--config", str(path), "--mode", "rgb", "convert", "#00f"]) == 0
    assert capsys.readouterr().out == "rgb(0,0,255)\n"


def test_bad_config_exits_with_error(tmp_path, capsys):
    path = tmp_path / "config.yaml"
    path.write_text("mode: cmyk\n")
    assert main(["--config", str(path), "convert", "#f00"]) == 1
    assert "cmyk" in capsys.readouterr().err


@pytest.mark.parametrize("steps", ["0", "-2", "x"])
def test_invalid_steps_rejected_by_argparse(steps):
    with pytest.raises(SystemExit) as exc_info:
        main(["tween", "#000", "#fff", "--steps", steps])
    assert exc_info.value.code == 2
