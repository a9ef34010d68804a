# examples/demo_pipeline.py
import logging

import numpy as np

from rg3d import setup_logging
from rg3d.pipeline import merge_collinear_segments

if __name__ == "__main__":
    setup_logging(logging.DEBUG)

    segments = np.array([
        [[0, 0, 0], [5, 0, 0]],
        [[3, 0, 0], [10, 0, 0]],
        [[12, 0, 0], [14, 0, 0]],
        [[0, 0, 0], [1, 1, 1]],
        [[0.5, 0.5, 0.5], [2, 2, 2]],
        [[7, 7, 7], [7, 7, 7]],
    ])

    merged = merge_collinear_segments(segments)
    print("Input segments:", len(segments))
    print("Merged pieces:", len(merged))
    for piece in merged:
        print(" ", piece)
