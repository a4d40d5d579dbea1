from PIL import Image

from fdfview.canvas import LINE_COLOR, Canvas, draw_map
from fdfview.cli import main
from fdfview.heightmap import load_map


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 0
    assert "Usage" in capsys.readouterr().out


def test_too_many_arguments_prints_usage(capsys):
    assert main(["a.fdf", "b.fdf"]) == 0
    assert "Usage" in capsys.readouterr().out


def test_valid_map_renders(tmp_path, capsys):
    source = tmp_path / "map.fdf"
    source.write_text("0 0 0\n0 5 0\n0 -2 0\n")
    output = tmp_path / "out.png"
    assert main([str(source), "-o", str(output)]) == 0
    assert "Valid File" in capsys.readouterr().out

    expected = Canvas()
    draw_map(expected, load_map(source))
    written = Image.open(output).convert("RGB")
    assert written.size == expected.to_image().size
    assert written.tobytes() == expected.to_image().tobytes()


def test_default_output_path(tmp_path):
    source = tmp_path / "grid.fdf"
    source.write_text("1 1\n1 1\n")
    assert main([str(source)]) == 0
    assert (tmp_path / "grid.png").is_file()


def test_invalid_map(tmp_path, capsys):
    source = tmp_path / "bad.fdf"
    source.write_text("1 2\n3\n")
    assert main([str(source), "-o", str(tmp_path / "x.png")]) == 1
    assert "Invalid File" in capsys.readouterr().out
    assert not (tmp_path / "x.png").exists()


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.fdf")]) == 1
    assert "error" in capsys.readouterr().out


def test_line_option_draws(tmp_path):
    source = tmp_path / "map.fdf"
    source.write_text("0 0\n")
    output = tmp_path / "line.png"
    assert main([str(source), "-o", str(output), "--line", "10", "700", "20", "700"]) == 0
    image = Image.open(output).convert("RGB")
    r, g, b = image.getpixel((15, 700))
    assert (r << 16) | (g << 8) | b == LINE_COLOR