import logging

import numpy as np

from cfprep.errors import InvalidArgument
from cfprep.utils import check_frame, flatten

logger = logging.getLogger(__name__)


# pre-processing the image...
"""
该函数对数据进行预处理，得到 correlation filter 的输入:
1.对每个像素取对数 ln(p + 1)，压缩动态范围，同时避免 ln(0)
2.减去均值，使数据的均值为 0
3.除以 L2 范数，使其范数为 1 (范数为 0 时跳过这一步)
4.乘以 cosine 窗，让图像边缘的数值逐渐变为 0，减弱频谱泄漏的现象
返回的向量按列展开，即 (x, y) 位置的值在下标 x * height + y 处
"""


def preprocess(frame):
    frame = check_frame(frame)
    # get the size of the img...
    height, width = frame.shape

    prepped = log_transform(flatten(frame))
    prepped = zero_mean(prepped)
    prepped = unit_norm(prepped)

    # use the cosine window...
    prepped = prepped * flatten(cosine_window(width, height))

    return prepped.astype(np.float32)


def log_transform(values):
    # add 1, and take the natural logarithm
    return np.log(np.asarray(values, dtype=np.float64) + 1)


def zero_mean(values):
    values = np.asarray(values, dtype=np.float64)
    # 所有像素的值都相同时，直接返回全 0 向量，避免浮点误差留下的噪声在下一步被放大
    if values.size == 0 or np.all(values == values.flat[0]):
        return np.zeros_like(values)
    return values - np.mean(values)


def unit_norm(values):
    """
    normalize to norm = 1, if possible
    :param values: zero mean vector
    :return: the vector divided by its L2 norm, or an unchanged copy when the norm is 0
    """
    values = np.asarray(values, dtype=np.float64)
    norm = np.sqrt(np.sum(values * values))
    if norm == 0:
        logger.debug('zero norm vector of length %d, skip normalization', values.size)
        return values.copy()
    return values / norm


def cosine_window(width, height):
    """
    二维 cosine 窗，shape 为 (height, width)
    (x, y) 处的值为 min(sin(pi * x / (width - 1)), sin(pi * y / (height - 1)))，
    也就是两个方向上一维窗的较小值，而不是它们的乘积
    :param width: window width, at least 1
    :param height: window height, at least 1
    :return: window of format (height, width), values in [0, 1]
    """
    win_col = _sine_window(width)
    win_row = _sine_window(height)
    mask_col, mask_row = np.meshgrid(win_col, win_row)

    win = np.minimum(mask_col, mask_row)

    return win


def _sine_window(n):
    if n < 1:
        raise InvalidArgument('window length must be at least 1, got %r' % (n,))
    # 长度为 1 时 n - 1 为 0，这个方向上不做加窗
    if n == 1:
        logger.debug('single pixel axis, using a constant window of 1')
        return np.ones(1)
    win = np.sin(np.pi * np.arange(n) / (n - 1))
    # sin(pi) 的浮点结果不是 0，两端直接置 0
    win[0] = win[-1] = 0.0
    return np.clip(win, 0.0, 1.0)
