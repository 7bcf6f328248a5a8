""" exceptions raised by pycolor """


class PyColorError(Exception):
    """ base class for all pycolor errors """


class ChannelRangeError(PyColorError, ValueError):
    """ a byte channel or packed value is outside of its range """


class LaneShapeError(PyColorError, ValueError):
    """ a lane vector does not hold exactly four values """


class BufferSizeError(PyColorError, ValueError):
    """ a color buffer does not hold a whole number of colors """
