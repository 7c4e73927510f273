# platedetect

Pre- and post-processing for YOLO-style object detectors, aimed at
finding licence plates in photographs and saving each one as a cropped
image. It depends on `numpy` and `pillow` only.

## What is in the package

- `platedetect.detection`
  - `Rect(x, y, width, height)`: a frozen integer rectangle.
    `Rect.area()` returns `width * height`; `Rect.intersect(other)` (also
    written `a & b`) returns the overlap, or an empty `Rect()` when the two
    do not meet. `str(rect)` gives `[W x H from (X, Y)]`.
  - `Detection`: `class_id`, `class_name`, `confidence`, `color` (a BGR
    triple) and `box` (a `Rect`).
- `platedetect.letterbox`
  - `format_to_square(image, width, height)` scales an 8-bit image to fit
    `width x height`, keeping its aspect ratio, and pads the rest with
    zeros, centred. It returns a `Letterbox` with `image`, `pad_x`,
    `pad_y` and `scale`, so boxes can be mapped back to the original.
  - `blob_from_image(image, width, height)` resizes an 8-bit image
    (bilinear), scales pixels to `0..1`, swaps the first and third
    channels (BGR to RGB) and returns a `1 x C x H x W` `float32` array.
    A grayscale image gives one channel.
- `platedetect.postprocess`
  - `is_yolov8_layout(output)` is true when the third dimension of the
    output is larger than the second.
  - `decode_output(output, num_classes, score_threshold,
    confidence_threshold, pad_x=0, pad_y=0, scale=1.0)` reads a 3-D
    output of either layout and returns `Candidate` objects
    (`class_id`, `confidence`, `box`):
    - YOLOv8 `(batch, 4 + classes, rows)`: a row is kept when its best
      class score is above `score_threshold`; that score is its
      confidence.
    - YOLOv5 `(batch, rows, 5 + classes)`: a row is kept when its
      objectness is at least `confidence_threshold` and its best class
      score is above `score_threshold`; the objectness is its confidence.

    Centre/size boxes are turned into `Rect`s in original image
    coordinates using the padding and scale. A `ValueError` is raised for
    a tensor that is not 3-D, for fewer than one class, or for rows too
    short for the number of classes.
  - `iou(a, b)`: intersection over union; two empty rectangles give 1.0.
  - `nms_boxes(boxes, scores, score_threshold, nms_threshold)`: greedy
    non-maximum suppression. Boxes scoring above `score_threshold` are
    visited best first; one is kept unless its IoU with an already kept
    box exceeds `nms_threshold`. Returns the kept indices, best first.
- `platedetect.inference`
  - `load_classes(path)`: one class name per line; a file that cannot be
    opened gives an empty list.
  - `Inference`: ties the steps together (see below).
- `platedetect.pipeline`: folder processing (see below).

## Running detection

`Inference` does not load a model file. It is given a *network*: any
callable that takes the input blob and returns the output tensor (or a
list or tuple whose first item is the output tensor).

```python
import numpy as np
from platedetect.inference import Inference

inference = Inference(
    network=my_network,      # blob (1 x 3 x 640 x 640) -> output tensor
    model_shape=(640, 640),  # (width, height)
)

image = np.zeros((480, 640, 3), dtype=np.uint8)   # BGR, H x W x 3, uint8
for detection in inference.run_inference(image):
    print(detection.class_name, detection.confidence, detection.box)
```

Defaults: one class, `Licence`; `letterbox=True`;
`confidence_threshold=0.25`; `score_threshold=0.45`;
`nms_threshold=0.50`. Letterboxing is applied only when the model shape
is square. Each detection gets a random colour with every component in
`100..255`; pass `rng=random.Random(seed)` for repeatable colours.
With an empty class list `run_inference` raises `ValueError`.

## Cropping plates from a folder of photos

`process_images(inference, base_path)` works on a folder laid out as

```
project/
    data/           input photos (*.jpg or *.JPG)
    output_data/    crops are written here; created when missing
```

```python
from platedetect.pipeline import process_images

written = process_images(inference, "project")
```

For each photo (in name order) it runs `inference.run_inference` on the
BGR pixels, clips every box to the image and saves the crop, then
returns the list of written paths. It prints progress and the total
time; photos that cannot be read are reported and skipped.

The pieces can be used on their own:

- `list_images(folder)`: sorted `folder/name` paths of `.jpg` and `.JPG`
  files; an unreadable folder gives an empty list.
- `ensure_output_dir(path)`: creates the folder (mode `0o755`) and
  returns `True` only when it was created.
- `crop_output_path(image_path, index)`: for `project/data/car.jpg` and
  index 0 gives `project/output_data/car-0.jpg`. A path without a `/`
  raises `ValueError`.
- `crop_detection(image, box)`: a copy of the part of the image inside
  the box, clipped to the image; a box wholly outside raises
  `ValueError`.

## What the package does not do

There is no command-line program, and nothing here reads or runs a
model file (ONNX or otherwise) or chooses a CPU or GPU for it: the
network is whatever callable you hand to `Inference`. Boxes are not
drawn on images and nothing is shown on screen; the only output is the
returned detections and the saved crops.