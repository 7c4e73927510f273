import os

import numpy as np
import pytest
from PIL import Image

from platedetect.detection import Detection, Rect
from platedetect.pipeline import (
    crop_detection,
    crop_output_path,
    ensure_output_dir,
    list_images,
    process_images,
)


class FakeInference:
    def __init__(self, detections):
        self.detections = detections
        self.frames = []

    def run_inference(self, image):
        self.frames.append(image)
        return self.detections


def test_crop_output_path():
    assert crop_output_path("/base/data/img.jpg", 0) == "/base/output_data/img-0.jpg"


def test_crop_output_path_without_extension():
    assert crop_output_path("/base/data/img", 2) == "/base/output_data/img-2.jpg"


def test_crop_output_path_needs_folder():
    with pytest.raises(ValueError):
        crop_output_path("img.jpg", 0)


def test_list_images_filters_extensions(tmp_path):
    for name in ["a.jpg", "b.JPG", "c.png", ".jpg", "d.jpeg"]:
        (tmp_path / name).write_bytes(b"")
    folder = str(tmp_path)
    assert list_images(folder) == [f"{folder}/a.jpg", f"{folder}/b.JPG"]


def test_list_images_missing_folder(tmp_path):
    assert list_images(tmp_path / "missing") == []


def test_ensure_output_dir(tmp_path):
    target = tmp_path / "output_data"
    assert ensure_output_dir(target) is True
    assert target.is_dir()
    assert ensure_output_dir(target) is False


def test_ensure_output_dir_failure(tmp_path):
    target = tmp_path / "missing" / "output_data"
    assert ensure_output_dir(target) is False
    assert not target.exists()


def test_crop_detection_clips_to_image():
    image = np.zeros((10, 10, 3), dtype=np.uint8)
    crop = crop_detection(image, Rect(5, 5, 10, 10))
    assert crop.shape == (5, 5, 3)
    crop[:] = 9
    assert not image.any()


def test_crop_detection_outside_image():
    with pytest.raises(ValueError):
        crop_detection(np.zeros((10, 10, 3), dtype=np.uint8), Rect(20, 20, 5, 5))


def test_process_images_writes_crops(tmp_path):
    data = tmp_path / "data"
    data.mkdir()
    Image.new("RGB", (10, 10), (255, 0, 0)).save(data / "good.jpg")
    (data / "broken.jpg").write_bytes(b"not an image")
    inference = FakeInference([Detection(box=Rect(1, 1, 4, 4))])

    written = process_images(inference, tmp_path)

    expected = f"{tmp_path}/output_data/good-0.jpg"
    assert written == [expected]
    assert os.path.isfile(expected)
    with Image.open(expected) as crop:
        assert crop.size == (4, 4)
    assert len(inference.frames) == 1
    frame = inference.frames[0]
    assert frame[..., 2].mean() > 200
    assert frame[..., 0].mean() < 50