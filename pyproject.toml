[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "platedetect"
version = "0.1.0"
description = "Letterboxing, YOLOv5/YOLOv8 output decoding, NMS and crop extraction for licence plate detection"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = ["yolo", "yolov8", "yolov5", "object-detection", "licence-plate", "nms", "letterbox"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Recognition",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["platedetect"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
