"""Batch processing: detect objects in every JPEG of a folder and save the crops."""

from __future__ import annotations

import os
import sys
import time

import numpy as np
from PIL import Image

from platedetect.detection import Rect


def list_images(folder: str | os.PathLike) -> list[str]:
    """Return paths of the .jpg and .JPG files in a folder, or none if it cannot be read."""
    folder = os.fspath(folder)
    try:
        names = os.listdir(folder)
    except OSError:
        return []
    return [
        f"{folder}/{name}"
        for name in sorted(names)
        if len(name) > 4 and name[-4:] in (".jpg", ".JPG")
    ]


def ensure_output_dir(path: str | os.PathLike) -> bool:
    """Create the folder if it is missing; return True only if it was created."""
    path = os.fspath(path)
    if os.path.isdir(path):
        print(f"Folder already exists: {path}")
        return False
    try:
        os.mkdir(path, 0o755)
    except OSError as exc:
        print(f"Failed to create folder: {exc.strerror}", file=sys.stderr)
        return False
    print(f"Created folder: {path}")
    return True


def crop_output_path(image_path: str, index: int) -> str:
    """Name the crop file for a detection: a sibling output_data folder of the image's folder."""
    slash = image_path.rfind("/")
    if slash < 0:
        raise ValueError(f"image path has no folder: {image_path!r}")
    data_dir = image_path[:slash]
    parent_slash = data_dir.rfind("/")
    parent = data_dir if parent_slash < 0 else data_dir[:parent_slash]
    dot = image_path.rfind(".")
    stem = image_path[slash:dot] if dot > slash else image_path[slash:]
    return f"{parent}/output_data{stem}-{index}.jpg"


def crop_detection(image: np.ndarray, box: Rect) -> np.ndarray:
    """Copy out the part of the image inside the box, clipped to the image."""
    rows, cols = image.shape[:2]
    safe = box & Rect(0, 0, cols, rows)
    if safe.area() == 0:
        raise ValueError(f"box {box} lies outside the image")
    return image[safe.y:safe.y + safe.height, safe.x:safe.x + safe.width].copy()


def _load_bgr(path: str) -> np.ndarray | None:
    try:
        with Image.open(path) as picture:
            rgb = np.asarray(picture.convert("RGB"))
    except OSError:
        return None
    if rgb.size == 0:
        return None
    return np.ascontiguousarray(rgb[..., ::-1])


def _save_bgr(path: str, image: np.ndarray) -> None:
    if image.ndim == 3:
        image = image[..., ::-1]
    Image.fromarray(np.ascontiguousarray(image)).save(path)


def process_images(inference, base_path: str | os.PathLike) -> list[str]:
    """Run detection on base_path/data/*.jpg, save crops to base_path/output_data, return their paths."""
    start = time.perf_counter()
    base = os.fspath(base_path)
    ensure_output_dir(f"{base}/output_data")

    written: list[str] = []
    for number, image_path in enumerate(list_images(f"{base}/data")):
        frame = _load_bgr(image_path)
        if frame is None:
            print("Image not found or empty!", file=sys.stderr)
            continue
        print(f"Image found: [{number}]", file=sys.stderr)

        detections = inference.run_inference(frame)
        print(f"Number of detections:{len(detections)}")
        for index, detection in enumerate(detections):
            print(f"Detection {index}: {detection.box}")
            print(f"box: {detection.box}")
            crop = crop_detection(frame, detection.box)
            output_path = crop_output_path(image_path, index)
            print(output_path)
            _save_bgr(output_path, crop)
            written.append(output_path)

    elapsed = time.perf_counter() - start
    print(f"Total execution time: {elapsed} seconds.")
    return written