""" the integer and normalized color types """
import logging
from collections import namedtuple
from numbers import Integral, Real
from typing import Iterator
import numpy as np
from . import lanes
from .exceptions import ChannelRangeError


logger = logging.getLogger(__name__)

BYTE_MAX = 255
PACKED_MAX = 0xffffffff

# both scale factors are float32 so the conversions stay in lane precision
_SCALE = lanes.DTYPE(BYTE_MAX)
_INV_SCALE = lanes.DTYPE(1.0) / _SCALE


def _check_channel(name, value) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ChannelRangeError(
            'channel {} must be an integer, got {!r}'.format(name, value))
    if not 0 <= value <= BYTE_MAX:
        raise ChannelRangeError(
            'channel {} out of range: {}'.format(name, value))
    return int(value)


class ColorU(namedtuple('ColorU', 'r g b a')):
    """ an RGBA color with one byte per channel

    Equality, ordering and hashing are those of the (r, g, b, a) tuple.

    >>> ColorU(255, 0, 0, 255)
    #ff0000
    >>> ColorU(1, 0, 0, 0) < ColorU(1, 1, 0, 0)
    True
    """
    __slots__ = ()

    def __new__(cls, r: int = 0, g: int = 0, b: int = 0, a: int = 0):
        channels = (_check_channel(name, value)
                    for name, value in zip(cls._fields, (r, g, b, a)))
        return super().__new__(cls, *channels)

    @classmethod
    def _make(cls, iterable):
        return cls(*iterable)

    @classmethod
    def from_packed32(cls, value: int) -> 'ColorU':
        """ convert an rgba 32-bit integer to a color

        >>> ColorU.from_packed32(0x112233ff)
        #112233
        """
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise ChannelRangeError(
                'packed color must be an integer, got {!r}'.format(value))
        if not 0 <= value <= PACKED_MAX:
            raise ChannelRangeError(
                'packed color out of range: {:#x}'.format(value))
        red = (value >> 24) & 0xff
        green = (value >> 16) & 0xff
        blue = (value >> 8) & 0xff
        alpha = value & 0xff
        return cls(red, green, blue, alpha)

    def to_packed32(self) -> int:
        """ convert the color to an rgba 32-bit integer

        >>> ColorU(128, 204, 0, 255).to_packed32()
        2160853247
        """
        return (self.r << 24) | (self.g << 16) | (self.b << 8) | self.a

    @classmethod
    def transparent_black(cls) -> 'ColorU':
        return cls.from_packed32(0)

    @classmethod
    def opaque_black(cls) -> 'ColorU':
        return cls(0, 0, 0, BYTE_MAX)

    def to_normalized(self) -> 'ColorF':
        """ scale every channel into [0.0, 1.0] """
        vector = np.array(self, dtype=lanes.DTYPE) * _INV_SCALE
        return ColorF.from_lanes(vector)

    def is_opaque(self) -> bool:
        return self.a == BYTE_MAX

    def is_fully_transparent(self) -> bool:
        return self.a == 0

    def __repr__(self):
        if self.a == BYTE_MAX:
            return '#{:02x}{:02x}{:02x}'.format(self.r, self.g, self.b)
        return 'rgba({}, {}, {}, {!r})'.format(
            self.r, self.g, self.b, self.a / 255.0)


class ColorF:
    """ an RGBA color held as four float32 lanes

    Lanes are nominally in [0.0, 1.0] but nothing clamps them. There is no
    value equality or hashing; compare through to_integer() or a tolerance.
    """
    __slots__ = ('_lanes',)
    __hash__ = None

    def __init__(self, r: float = 0.0, g: float = 0.0, b: float = 0.0,
                 a: float = 0.0):
        self._lanes = lanes.new(r, g, b, a)

    @classmethod
    def from_lanes(cls, vector) -> 'ColorF':
        """
        Wrap an existing lane vector

        :param vector: any array-like holding the r, g, b and a lanes
        """
        color = cls.__new__(cls)
        color._lanes = lanes.from_array(vector)
        return color

    @classmethod
    def transparent_black(cls) -> 'ColorF':
        return cls.from_lanes(lanes.zero())

    @classmethod
    def white(cls) -> 'ColorF':
        return cls.from_lanes(lanes.splat(1.0))

    @property
    def vector(self) -> np.ndarray:
        """ the read-only float32 lane vector """
        return self._lanes

    @property
    def r(self) -> float:
        return float(self._lanes[0])

    @property
    def g(self) -> float:
        return float(self._lanes[1])

    @property
    def b(self) -> float:
        return float(self._lanes[2])

    @property
    def a(self) -> float:
        return float(self._lanes[3])

    def to_integer(self) -> ColorU:
        """
        Convert to a byte color, truncating toward zero

        Lanes outside [0.0, 1.0] cannot be represented; they are clamped to
        [0, 255] (NaN becomes 0) and a warning is logged.
        """
        scaled = self._lanes * _SCALE
        truncated = lanes.to_i32x4(scaled)
        channels = np.clip(truncated, 0, BYTE_MAX)
        if np.isnan(scaled).any() or not np.array_equal(channels, truncated):
            logger.warning('clamped out of range color %r', self)
        return ColorU(*(int(channel) for channel in channels))

    def lerp(self, other: 'ColorF', t: Real) -> 'ColorF':
        """
        Linearly interpolate toward another color

        :param other: the color reached at t == 1
        :param t: the interpolation factor, not clamped

        Alpha is interpolated like any other lane; nothing is premultiplied.
        """
        if not isinstance(other, ColorF):
            raise TypeError('cannot interpolate toward {!r}'.format(other))
        vector = self._lanes + (other._lanes - self._lanes) * lanes.DTYPE(t)
        return ColorF.from_lanes(vector)

    def __iter__(self) -> Iterator[float]:
        return (float(lane) for lane in self._lanes)

    def __len__(self):
        return lanes.WIDTH

    def __array__(self, dtype=None, copy=None):
        return np.array(self._lanes, dtype=dtype)

    def __repr__(self):
        scaled = self._lanes[:3] * _SCALE
        return 'rgba({}, {}, {}, {})'.format(
            *(str(lane) for lane in scaled), str(self._lanes[3]))
