"""
cfprep — frame preprocessing for correlation filter trackers
=============================================================

    import cfprep

    # whitened, cosine windowed feature vector, length width * height
    fi = cfprep.preprocess(cfprep.window_crop(frame, 64, 64, (cx, cy)))

    # rotated / scaled training samples of the first frame
    for sample in cfprep.rotations(frame):
        ...
    for sample in cfprep.scalings(frame, sink=cfprep.ImageDirectorySink('debug')):
        ...
"""

__version__ = '0.1.0'

from cfprep.config import CONFIG, get as get_config
from cfprep.crop import crop_corner, window_crop
from cfprep.errors import InvalidArgument, LengthMismatch, PreprocessError
from cfprep.preprocess import cosine_window, log_transform, preprocess, unit_norm, zero_mean
from cfprep.sink import ImageDirectorySink
from cfprep.utils import (flatten, index_to_coords, linear_mapping, to_display_frame,
                          to_frame, unflatten)
from cfprep.warp import (ROTATION_ANGLES, SCALE_FACTORS, RotationVariants, ScaleVariants,
                         random_rotation, rotate, rotations, scale, scalings)
