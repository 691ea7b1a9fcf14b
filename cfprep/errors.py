class PreprocessError(Exception):
    """
    base class of all the errors raised by cfprep
    """
    pass


class InvalidArgument(PreprocessError, ValueError):
    """
    raised when a size, a width, a frame shape or an augmentation parameter is not valid
    """
    pass


class LengthMismatch(PreprocessError, ValueError):
    """
    raised when a flat buffer does not hold exactly width * height values
    """

    def __init__(self, length, width, height):
        self.length = length
        self.width = width
        self.height = height
        super(LengthMismatch, self).__init__(
            'buffer of length %d cannot hold a %dx%d frame (%d values expected)'
            % (length, width, height, width * height))
