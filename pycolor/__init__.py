from .color import ColorU, ColorF
from .buffer import unpack_colors, pack_colors, to_float_buffer, from_float_buffer
from .exceptions import PyColorError, ChannelRangeError, LaneShapeError, BufferSizeError


__all__ = ['ColorU', 'ColorF',
           'unpack_colors', 'pack_colors', 'to_float_buffer', 'from_float_buffer',
           'PyColorError', 'ChannelRangeError', 'LaneShapeError', 'BufferSizeError']
