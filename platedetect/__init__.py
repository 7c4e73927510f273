"""Letterboxing, YOLO output decoding, NMS and crop extraction for plate detection."""

__version__ = "0.1.0"

__all__ = ["detection", "letterbox", "postprocess", "inference", "pipeline"]