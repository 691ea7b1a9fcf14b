import logging

import numpy as np

from cfprep.errors import InvalidArgument, LengthMismatch

logger = logging.getLogger(__name__)


"""
feature vector 的排列顺序:
外层循环遍历 width，内层循环遍历 height，也就是说 (x, y) 这个像素在向量中的下标为 x * height + y。
对于 shape 为 (height, width) 的 numpy 数组来说，这就是按列展开 (order='F')。
"""


def check_frame(frame):
    """
    检查 frame 是否是一个非空的二维灰度图像
    :param frame: gray scale image with format (height, width)
    :return: the frame as an ndarray
    """
    frame = np.asarray(frame)
    if frame.ndim != 2:
        raise InvalidArgument('frame must be a 2D gray image, not %dD' % frame.ndim)
    if frame.size == 0:
        raise InvalidArgument('frame must not be empty, got shape %s' % (frame.shape,))
    return frame


def index_to_coords(width, index):
    """
    convert a linear buffer index to (x, y) coordinates
    :param width: width of the frame, must be positive
    :param index: non-negative index into the flat buffer
    :return: (x, y)
    """
    if width <= 0:
        raise InvalidArgument('width must be positive, got %r' % (width,))
    if index < 0:
        raise InvalidArgument('index must not be negative, got %r' % (index,))
    x = index % width
    y = (index - x) // width
    return x, y


def flatten(frame):
    # (height, width) -> width * height vector, height varies fastest...
    frame = check_frame(frame)
    return frame.ravel(order='F')


def unflatten(values, width, height):
    """
    将按列展开的向量恢复为 (height, width) 的二维数组，是 flatten 的逆操作
    """
    values = np.asarray(values).ravel()
    if width < 0 or height < 0:
        raise InvalidArgument('width and height must not be negative, got %dx%d' % (width, height))
    if values.size != width * height:
        raise LengthMismatch(values.size, width, height)
    return values.reshape((height, width), order='F')


def to_frame(values, width, height):
    """
    Convert a flat buffer of floats to an 8 bit gray frame.
    Each value is truncated toward zero and wrapped modulo 256, nan and inf become 0.
    This is only meant for debug visualization, it is not the inverse of preprocess.
    """
    values = np.asarray(values, dtype=np.float64)
    values = unflatten(values, width, height)
    values = np.nan_to_num(values, nan=0.0, posinf=0.0, neginf=0.0)
    # np.mod 的结果总是在 [0, 256) 之间，负数也会被回绕
    return np.mod(np.trunc(values), 256).astype(np.uint8)


# used for linear mapping...
# 进行归一化操作，将数据映射到 [0, 1] 之间
def linear_mapping(img):
    img = np.asarray(img, dtype=np.float64)
    spread = img.max() - img.min()
    if spread == 0:
        return np.zeros_like(img)
    return (img - img.min()) / spread


def to_display_frame(values, width, height):
    """
    map a feature vector to a viewable 0-255 frame
    """
    values = np.asarray(values)
    if values.size == 0:
        return to_frame(values, width, height)
    return to_frame(linear_mapping(values) * 255, width, height)
