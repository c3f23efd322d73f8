import numpy as np
from PIL import Image

from chroma_swap.cli import main


def save_image(path, size, color):
    Image.new("RGB", size, color).save(path)
    return str(path)


def test_main_writes_overlay_and_edges(tmp_path):
    foreground = save_image(tmp_path / "foreground.png", (6, 4), (0, 255, 0))
    background = save_image(tmp_path / "background.png", (3, 3), (0, 0, 200))
    output = tmp_path / "overlay.png"
    edges = tmp_path / "edges.png"

    status = main([foreground, background, "-o", str(output), "--edges", str(edges)])

    assert status == 0
    with Image.open(output) as overlay:
        assert overlay.size == (6, 4)
        assert overlay.getpixel((5, 3)) == (0, 0, 200)
    with Image.open(edges) as preview:
        assert preview.size == (8, 8)


def test_main_reference_scan(tmp_path):
    foreground = save_image(tmp_path / "foreground.png", (3, 3), (0, 255, 0))
    background = save_image(tmp_path / "background.png", (1, 1), (0, 0, 200))
    output = tmp_path / "overlay.png"

    assert main([foreground, background, "-o", str(output), "--reference-scan", "-v"]) == 0
    with Image.open(output) as overlay:
        assert overlay.getpixel((0, 0)) == (0, 0, 200)
        assert overlay.getpixel((2, 2)) == (0, 255, 0)


def test_main_fails_on_missing_file(tmp_path):
    background = save_image(tmp_path / "background.png", (1, 1), (0, 0, 0))

    assert main([str(tmp_path / "missing.png"), background, "-o", str(tmp_path / "o.png")]) == 1


def test_main_fails_on_invalid_grid_size(tmp_path):
    foreground = save_image(tmp_path / "foreground.png", (2, 2), (0, 0, 0))

    assert main([foreground, foreground, "--grid-size", "0", "-o", str(tmp_path / "o.png")]) == 1


def save_keyed_foreground(path):
    # green everywhere except one pixel 58 away from the green bucket center on red
    pixels = np.full((4, 4, 3), (0, 255, 0), dtype=np.uint8)
    pixels[2, 1] = (90, 224, 32)
    Image.fromarray(pixels, "RGB").save(path)
    return str(path)


def run_overlay(tmp_path, *options):
    foreground = save_keyed_foreground(tmp_path / "foreground.png")
    background = save_image(tmp_path / "background.png", (2, 2), (0, 0, 200))
    output = tmp_path / "overlay.png"

    assert main([foreground, background, "-o", str(output), *options]) == 0
    with Image.open(output) as overlay:
        return overlay.getpixel((0, 0)), overlay.getpixel((1, 2))


def test_main_default_threshold_replaces_near_pixels(tmp_path):
    assert run_overlay(tmp_path) == ((0, 0, 200), (0, 0, 200))


def test_main_threshold_option(tmp_path):
    assert run_overlay(tmp_path, "--threshold", "40") == ((0, 0, 200), (90, 224, 32))


def test_main_grid_size_option(tmp_path):
    # 8 buckets per channel: dominant color (16, 240, 16), threshold 32
    assert run_overlay(tmp_path, "--grid-size", "8") == ((0, 0, 200), (90, 224, 32))


def test_main_fails_on_unknown_output_format(tmp_path):
    foreground = save_image(tmp_path / "foreground.png", (2, 2), (0, 255, 0))
    background = save_image(tmp_path / "background.png", (2, 2), (0, 0, 200))

    assert main([foreground, background, "-o", str(tmp_path / "overlay.notaformat")]) == 1
