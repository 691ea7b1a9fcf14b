import logging

from cfprep.errors import InvalidArgument
from cfprep.utils import check_frame

logger = logging.getLogger(__name__)


def crop_corner(frame_size, window_size, center):
    """
    计算截取窗口左上角的坐标，保证窗口完全落在图像内部
    :param frame_size: (width, height) of the source frame
    :param window_size: (width, height) of the window
    :param center: (x, y) the window should be centered on
    :return: (x, y) of the top left corner
    """
    frame_w, frame_h = frame_size
    win_w, win_h = window_size
    if win_w < 1 or win_h < 1:
        raise InvalidArgument('window must be at least 1x1, got %dx%d' % (win_w, win_h))
    if win_w > frame_w or win_h > frame_h:
        raise InvalidArgument('window %dx%d does not fit in a %dx%d frame' % (win_w, win_h, frame_w, frame_h))

    cx, cy = int(center[0]), int(center[1])
    # 左上角坐标小于 0 时取 0
    x = max(cx - win_w // 2, 0)
    y = max(cy - win_h // 2, 0)
    # 窗口超出右边界或下边界时，将窗口向左或向上平移
    x = min(x, frame_w - win_w)
    y = min(y, frame_h - win_h)

    if (x, y) != (cx - win_w // 2, cy - win_h // 2):
        logger.debug('window %dx%d centered on (%d, %d) shifted to corner (%d, %d)', win_w, win_h, cx, cy, x, y)
    return x, y


def window_crop(frame, window_width, window_height, center):
    """
    Extract a window_width x window_height sub frame centered on `center`.
    The window is shifted, never cut, when it would leave the frame.
    :param frame: gray image with format (height, width)
    :param window_width: width of the window, at most the frame width
    :param window_height: height of the window, at most the frame height
    :param center: (x, y)
    :return: a copy of the window with format (window_height, window_width)
    """
    frame = check_frame(frame)
    height, width = frame.shape
    x, y = crop_corner((width, height), (window_width, window_height), center)
    return frame[y:y + window_height, x:x + window_width].copy()
