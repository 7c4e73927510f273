import numpy as np
import pytest

from platedetect.letterbox import blob_from_image, format_to_square


def test_wide_image_is_padded_top_and_bottom():
    image = np.full((10, 20, 3), 200, dtype=np.uint8)
    boxed = format_to_square(image, 40, 40)
    assert boxed.image.shape == (40, 40, 3)
    assert boxed.scale == 2.0
    assert boxed.pad_x == 0
    assert boxed.pad_y == 10
    assert not boxed.image[:10].any()
    assert not boxed.image[30:].any()
    assert (boxed.image[10:30] == 200).all()


def test_square_image_of_model_size_is_unchanged():
    image = np.arange(40 * 40 * 3, dtype=np.uint8).reshape(40, 40, 3)
    boxed = format_to_square(image, 40, 40)
    assert boxed.pad_x == boxed.pad_y == 0
    assert boxed.scale == 1.0
    assert np.array_equal(boxed.image, image)


def test_letterbox_keeps_dtype_and_channels():
    image = np.full((30, 12, 3), 7, dtype=np.uint8)
    boxed = format_to_square(image, 24, 24)
    assert boxed.image.dtype == np.uint8
    assert boxed.image.shape[2] == 3
    assert boxed.pad_x > 0
    assert boxed.pad_y == 0


def test_blob_swaps_red_and_blue():
    image = np.zeros((8, 8, 3), dtype=np.uint8)
    image[..., 0] = 255
    blob = blob_from_image(image, 8, 8)
    assert blob.shape == (1, 3, 8, 8)
    assert blob.dtype == np.float32
    assert np.allclose(blob[0, 2], 1.0)
    assert np.allclose(blob[0, 0], 0.0)


def test_blob_resizes_to_width_and_height():
    image = np.full((10, 20, 3), 51, dtype=np.uint8)
    blob = blob_from_image(image, 4, 6)
    assert blob.shape == (1, 3, 6, 4)
    assert np.allclose(blob, 51 / 255)


def test_blob_of_grayscale_has_one_channel():
    image = np.full((5, 5), 255, dtype=np.uint8)
    blob = blob_from_image(image, 5, 5)
    assert blob.shape == (1, 1, 5, 5)
    assert np.allclose(blob, 1.0)


def test_non_byte_image_is_rejected():
    with pytest.raises(ValueError):
        blob_from_image(np.zeros((4, 4, 3), dtype=np.float32), 8, 8)