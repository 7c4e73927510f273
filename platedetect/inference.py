"""Running a detection network on an image and collecting its detections."""

from __future__ import annotations

import os
import random
from typing import Any, Callable, Iterable

import numpy as np

from platedetect.detection import Detection
from platedetect.letterbox import blob_from_image, format_to_square
from platedetect.postprocess import decode_output, nms_boxes

Network = Callable[[np.ndarray], Any]


def load_classes(path: str | os.PathLike) -> list[str]:
    """Read one class name per line; a file that cannot be opened yields no classes."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


class Inference:
    """Detector built around a network callable that maps an input blob to its outputs."""

    def __init__(
        self,
        network: Network,
        model_shape: tuple[int, int] = (640, 640),
        classes: Iterable[str] = ("Licence",),
        letterbox: bool = True,
        confidence_threshold: float = 0.25,
        score_threshold: float = 0.45,
        nms_threshold: float = 0.50,
        rng: random.Random | None = None,
    ) -> None:
        self.network = network
        width, height = model_shape
        self.model_shape = (int(width), int(height))
        self.classes = list(classes)
        self.letterbox = letterbox
        self.confidence_threshold = confidence_threshold
        self.score_threshold = score_threshold
        self.nms_threshold = nms_threshold
        self.rng = rng if rng is not None else random.Random()

    def _random_color(self) -> tuple[int, int, int]:
        return (self.rng.randint(100, 255), self.rng.randint(100, 255), self.rng.randint(100, 255))

    def run_inference(self, image: np.ndarray) -> list[Detection]:
        """Detect objects in a BGR image and return them after non-maximum suppression."""
        width, height = self.model_shape
        model_input = image
        pad_x, pad_y, scale = 0, 0, 1.0
        if self.letterbox and width == height:
            boxed = format_to_square(image, width, height)
            model_input, pad_x, pad_y, scale = boxed.image, boxed.pad_x, boxed.pad_y, boxed.scale

        result = self.network(blob_from_image(model_input, width, height))
        if isinstance(result, (list, tuple)):
            if not result:
                raise ValueError("the network returned no outputs")
            result = result[0]

        candidates = decode_output(
            result,
            len(self.classes),
            self.score_threshold,
            self.confidence_threshold,
            pad_x,
            pad_y,
            scale,
        )
        kept = nms_boxes(
            [candidate.box for candidate in candidates],
            [candidate.confidence for candidate in candidates],
            self.score_threshold,
            self.nms_threshold,
        )
        return [
            Detection(
                class_id=candidate.class_id,
                class_name=self.classes[candidate.class_id],
                confidence=candidate.confidence,
                color=self._random_color(),
                box=candidate.box,
            )
            for candidate in (candidates[index] for index in kept)
        ]