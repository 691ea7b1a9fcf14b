import logging
import os

import cv2

from cfprep.config import get

logger = logging.getLogger(__name__)


class ImageDirectorySink:
    """
    frame sink 会把每一个生成的训练样本保存为图片，只用于调试。
    any callable sink(name, frame) can be passed to the augmentation generators,
    this one writes <directory>/<name>.png with cv2.imwrite.
    """

    def __init__(self, directory='.', extension=None):
        self.directory = directory
        self.extension = extension if extension is not None else get('sink.extension', '.png')
        self.written = []

    def path_for(self, name):
        return os.path.join(self.directory, name + self.extension)

    def __call__(self, name, frame):
        # create the dir on first use...
        if not os.path.exists(self.directory):
            os.makedirs(self.directory)
        path = self.path_for(name)
        if not cv2.imwrite(path, frame):
            raise OSError('cv2.imwrite failed to write %s' % path)
        logger.debug('wrote %s', path)
        self.written.append(path)
        return path
