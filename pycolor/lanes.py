""" four-lane float vectors

A lane vector is a read-only numpy array of four float32 values. All of the
arithmetic needed by the color types (add, subtract, scalar multiply) is plain
numpy array arithmetic, which keeps it to one operation across all lanes.
"""
import numpy as np
from .exceptions import LaneShapeError


DTYPE = np.float32
WIDTH = 4
_I32_LIMIT = 2 ** 30


def _freeze(vector: np.ndarray) -> np.ndarray:
    vector.flags.writeable = False
    return vector


def new(x: float, y: float, z: float, w: float) -> np.ndarray:
    """ create a lane vector from four scalars """
    return _freeze(np.array((x, y, z, w), dtype=DTYPE))


def splat(value: float) -> np.ndarray:
    """ create a lane vector with every lane set to value

    >>> splat(2.0)
    array([2., 2., 2., 2.], dtype=float32)
    """
    return _freeze(np.full(WIDTH, value, dtype=DTYPE))


def zero() -> np.ndarray:
    """ the all-zero lane vector """
    return _freeze(np.zeros(WIDTH, dtype=DTYPE))


def from_array(values) -> np.ndarray:
    """
    Copy an array-like into a new lane vector

    :param values: any sequence or array holding exactly four numbers
    """
    vector = np.array(values, dtype=DTYPE).reshape(-1)
    if vector.shape != (WIDTH,):
        raise LaneShapeError(
            'expected {} lanes, got {}'.format(WIDTH, vector.size))
    return _freeze(vector)


def to_i32x4(vector: np.ndarray) -> np.ndarray:
    """
    Truncate each lane toward zero

    NaN lanes become 0 and lanes beyond +/-2**30 saturate. The result is a
    new int32 array.
    """
    truncated = np.trunc(np.nan_to_num(vector, nan=0.0))
    return np.clip(truncated, -_I32_LIMIT, _I32_LIMIT).astype(np.int32)
