import logging
import math

import cv2
import numpy as np

from cfprep.config import get
from cfprep.errors import InvalidArgument
from cfprep.utils import check_frame

logger = logging.getLogger(__name__)

ROTATION_ANGLES = tuple(get('augment.rotation_angles'))
SCALE_FACTORS = tuple(get('augment.scale_factors'))


"""
对第一帧的目标区域做刚性形变 (旋转、缩放)，生成多个训练样本，让滤波器在只有一帧的情况下也能够比较鲁棒。
所有的形变都以图像中心为锚点，使用最近邻插值，形变后图像外的部分填充为 0，输出与输入的大小相同。
"""


def _check_gray8(frame):
    frame = check_frame(frame)
    if frame.dtype != np.uint8:
        raise InvalidArgument('augmentation needs an 8 bit gray frame, got dtype %s' % frame.dtype)
    return np.ascontiguousarray(frame)


def _warp(frame, matrix):
    height, width = frame.shape
    return cv2.warpAffine(frame, matrix, (width, height),
                          flags=cv2.INTER_NEAREST,
                          borderMode=cv2.BORDER_CONSTANT,
                          borderValue=get('augment.border_value', 0))


def rotate(frame, angle):
    """
    rotate the frame about its center
    :param frame: 8 bit gray image with format (height, width)
    :param angle: radians, positive is counter clockwise
    :return: rotated frame with the same shape
    """
    frame = _check_gray8(frame)
    height, width = frame.shape
    # getRotationMatrix2D 的角度单位是度
    matrix_rot = cv2.getRotationMatrix2D((width / 2, height / 2), math.degrees(angle), 1)
    return _warp(frame, matrix_rot)


def scale(frame, factor):
    """
    scale the frame about its center
    :param frame: 8 bit gray image with format (height, width)
    :param factor: scale factor, > 1 zooms in
    :return: scaled frame with the same shape
    """
    frame = _check_gray8(frame)
    height, width = frame.shape
    # 旋转角度为 0 时，getRotationMatrix2D 得到的就是以中心为锚点的缩放矩阵
    matrix_scale = cv2.getRotationMatrix2D((width / 2, height / 2), 0, factor)
    return _warp(frame, matrix_scale)


def random_rotation(frame, max_degrees=None, rng=None):
    """
    随机旋转一次，角度在 [-max_degrees, max_degrees] 之间均匀分布
    """
    if max_degrees is None:
        max_degrees = get('augment.random_max_degrees')
    if rng is None:
        rng = np.random.default_rng()
    a = -max_degrees
    b = max_degrees
    r = a + (b - a) * rng.uniform()
    return rotate(frame, math.radians(r))


def _format_param(value):
    # 2.0 -> '2', 0.02 -> '0.02'
    text = repr(float(value))
    if text.endswith('.0'):
        text = text[:-2]
    return text


class Augmentation:
    """
    A finite sequence of warped copies of one frame, one per parameter.
    The frames are computed lazily each time the sequence is iterated, so it can be
    iterated again. When a sink is given, sink(name, frame) is called for every
    generated frame.
    """

    prefix_key = None

    def __init__(self, frame, params, sink=None):
        self.frame = _check_gray8(frame).copy()
        self.params = tuple(self._check_param(p) for p in params)
        self.sink = sink

    def _check_param(self, param):
        param = float(param)
        if not math.isfinite(param):
            raise InvalidArgument('augmentation parameter must be finite, got %r' % param)
        return param

    def warp(self, frame, param):
        raise NotImplementedError

    def artifact_name(self, param):
        return get(self.prefix_key) + _format_param(param)

    def items(self):
        # yield (param, frame) pairs...
        for param in self.params:
            warped = self.warp(self.frame, param)
            logger.debug('%s: generated variant %s', type(self).__name__, _format_param(param))
            if self.sink is not None:
                self.sink(self.artifact_name(param), warped)
            yield param, warped

    def __iter__(self):
        for _, warped in self.items():
            yield warped

    def __len__(self):
        return len(self.params)


class RotationVariants(Augmentation):
    prefix_key = 'sink.rotated_prefix'

    def warp(self, frame, param):
        return rotate(frame, param)


class ScaleVariants(Augmentation):
    prefix_key = 'sink.scaled_prefix'

    def _check_param(self, param):
        param = super(ScaleVariants, self)._check_param(param)
        if param <= 0:
            raise InvalidArgument('scale factor must be positive, got %r' % param)
        return param

    def warp(self, frame, param):
        return scale(frame, param)


def rotations(frame, angles=ROTATION_ANGLES, sink=None):
    return RotationVariants(frame, angles, sink=sink)


def scalings(frame, factors=SCALE_FACTORS, sink=None):
    return ScaleVariants(frame, factors, sink=sink)
