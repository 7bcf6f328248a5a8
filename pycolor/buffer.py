""" batch conversion between colors and raw buffers

Packed buffers hold one 32-bit rgba value per color, as read out of a parsed
document. Float buffers hold four consecutive float32 values per color in
r, g, b, a order, ready to be copied into a GPU uniform or vertex buffer.
"""
import logging
import struct
from typing import Iterable, Tuple, Union
import numpy as np
from . import lanes
from .color import ColorU, ColorF
from .exceptions import BufferSizeError


logger = logging.getLogger(__name__)

packed_structs = {
    'big': struct.Struct('>I'),
    'little': struct.Struct('<I'),
}


def _packed_struct(byteorder: str) -> struct.Struct:
    try:
        return packed_structs[byteorder]
    except KeyError:
        raise ValueError('invalid byteorder: {!r}'.format(byteorder)) from None


def unpack_colors(data: bytes, byteorder: str = 'big') -> Tuple[ColorU, ...]:
    """
    Unpack a buffer of packed 32-bit colors

    :param data: a bytes-like object holding whole 32-bit values
    :param byteorder: 'big' or 'little', the order of the 32-bit values

    The channel layout within each value is always r in the high byte and a in
    the low byte; byteorder only decides how the value itself is stored.
    """
    packed = _packed_struct(byteorder)
    if len(data) % packed.size:
        raise BufferSizeError(
            'buffer of {} bytes does not hold whole colors'.format(len(data)))
    colors = tuple(ColorU.from_packed32(value)
                   for value, in packed.iter_unpack(data))
    logger.debug('unpacked %d colors', len(colors))
    return colors


def pack_colors(colors: Iterable[ColorU], byteorder: str = 'big') -> bytes:
    """ pack colors into a buffer of 32-bit values, see unpack_colors """
    packed = _packed_struct(byteorder)
    data = b''.join(packed.pack(color.to_packed32()) for color in colors)
    logger.debug('packed %d colors', len(data) // packed.size)
    return data


def to_float_buffer(colors: Iterable[Union[ColorU, ColorF]]) -> np.ndarray:
    """
    Lay colors out as a flat float32 array

    :param colors: byte colors are normalized first, float colors are copied
    """
    vectors = []
    for color in colors:
        if isinstance(color, ColorU):
            color = color.to_normalized()
        elif not isinstance(color, ColorF):
            raise TypeError('not a color: {!r}'.format(color))
        vectors.append(color.vector)
    if not vectors:
        return np.zeros(0, dtype=lanes.DTYPE)
    return np.concatenate(vectors).astype(lanes.DTYPE, copy=False)


def from_float_buffer(buffer) -> Tuple[ColorF, ...]:
    """ split a flat float buffer back into float colors """
    values = np.asarray(buffer, dtype=lanes.DTYPE).reshape(-1)
    if values.size % lanes.WIDTH:
        raise BufferSizeError(
            'buffer of {} floats does not hold whole colors'.format(
                values.size))
    return tuple(ColorF.from_lanes(vector)
                 for vector in values.reshape(-1, lanes.WIDTH))
