import pytest
import numpy as np
from PIL import Image

from chroma_swap.edge_preview import edge_preview


def create_step_image(left_value, right_value, width=40, height=40, step=10):
    pixels = np.full((height, width, 3), right_value, dtype=np.uint8)
    pixels[:, :step] = left_value
    return Image.fromarray(pixels, "RGB")


@pytest.fixture
def test_image():
    return create_step_image(255, 0)


def test_edge_preview_is_grayscale(test_image):
    edges = edge_preview(test_image)

    assert isinstance(edges, Image.Image)
    assert edges.mode == "L"
    assert edges.size == test_image.size


def test_edge_preview_is_binary():
    pixels = np.zeros((40, 40, 3), dtype=np.uint8)
    pixels[:, 13:] = 30
    pixels[:, 26:] = 255

    edges = np.array(edge_preview(Image.fromarray(pixels, "RGB")))

    assert set(np.unique(edges).tolist()) <= {0, 255}
    assert edges.max() == 255


def test_edge_preview_is_mirrored(test_image):
    edges = np.array(edge_preview(test_image))

    # the step at column 10 ends up at column 30 once flipped
    assert edges[:, 25:35].any()
    assert not edges[:, 5:15].any()


def test_edge_preview_ignores_steps_below_threshold():
    edges = np.array(edge_preview(create_step_image(0, 10)))

    assert not edges.any()


def test_edge_preview_lower_thresholds_find_weak_steps():
    image = create_step_image(0, 10)

    edges = np.array(edge_preview(image, low_threshold=1, high_threshold=2))

    assert edges.any()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"kernel_size": 4},
        {"kernel_size": 0},
        {"sigma": -1},
        {"low_threshold": -1},
        {"low_threshold": 60, "high_threshold": 20},
    ],
)
def test_edge_preview_rejects_invalid_parameters(test_image, kwargs):
    with pytest.raises(ValueError):
        edge_preview(test_image, **kwargs)
