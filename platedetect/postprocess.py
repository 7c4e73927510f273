"""Decoding raw YOLO output into boxes and suppressing overlapping ones."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from platedetect.detection import Rect


@dataclass
class Candidate:
    """A box that passed the score thresholds, before non-maximum suppression."""

    class_id: int
    confidence: float
    box: Rect


def is_yolov8_layout(output) -> bool:
    """Tell a (batch, features, anchors) output from a (batch, anchors, features) one."""
    shape = np.shape(output)
    return shape[2] > shape[1]


def _to_rect(x: float, y: float, w: float, h: float, pad_x: float, pad_y: float, scale: float) -> Rect:
    return Rect(
        int((x - 0.5 * w - pad_x) / scale),
        int((y - 0.5 * h - pad_y) / scale),
        int(w / scale),
        int(h / scale),
    )


def decode_output(
    output,
    num_classes: int,
    score_threshold: float,
    confidence_threshold: float,
    pad_x: float = 0,
    pad_y: float = 0,
    scale: float = 1.0,
) -> list[Candidate]:
    """Turn a YOLOv5 or YOLOv8 output tensor into candidate boxes in image coordinates."""
    output = np.asarray(output, dtype=np.float32)
    if output.ndim != 3:
        raise ValueError(f"expected a 3-D output tensor, got shape {output.shape}")
    if num_classes < 1:
        raise ValueError("at least one class is required")

    yolov8 = is_yolov8_layout(output)
    rows = output[0].T if yolov8 else output[0]
    score_start = 4 if yolov8 else 5
    scores = rows[:, score_start:score_start + num_classes]
    if scores.shape[1] < num_classes:
        raise ValueError(
            f"output rows hold {rows.shape[1]} values, too few for {num_classes} classes"
        )

    best = scores.max(axis=1)
    class_ids = scores.argmax(axis=1)
    if yolov8:
        keep = best > score_threshold
        confidences = best
    else:
        objectness = rows[:, 4]
        keep = (objectness >= confidence_threshold) & (best > score_threshold)
        confidences = objectness

    return [
        Candidate(
            class_id=int(class_id),
            confidence=float(confidence),
            box=_to_rect(*(float(v) for v in row[:4]), pad_x, pad_y, scale),
        )
        for row, class_id, confidence in zip(rows[keep], class_ids[keep], confidences[keep])
    ]


def iou(a: Rect, b: Rect) -> float:
    """Intersection over union of two rectangles; two empty rectangles count as identical."""
    total = a.area() + b.area()
    if total <= 0:
        return 1.0
    overlap = a.intersect(b).area()
    return overlap / (total - overlap)


def nms_boxes(
    boxes: Sequence[Rect],
    scores: Sequence[float],
    score_threshold: float,
    nms_threshold: float,
) -> list[int]:
    """Return indices of boxes kept by greedy non-maximum suppression, best first."""
    if len(boxes) != len(scores):
        raise ValueError("boxes and scores must have the same length")
    order = sorted(
        (index for index, score in enumerate(scores) if score > score_threshold),
        key=lambda index: -scores[index],
    )
    kept: list[int] = []
    for index in order:
        if all(iou(boxes[index], boxes[other]) <= nms_threshold for other in kept):
            kept.append(index)
    return kept