import pytest
from pycolor import ColorU


BYTE_SAMPLES = (0, 1, 2, 127, 128, 254, 255)


@pytest.fixture(params=BYTE_SAMPLES)
def byte_value(request):
    return request.param


@pytest.fixture
def every_byte_color():
    """ one color per byte value, with each channel holding a different byte """
    return [ColorU(v, 255 - v, (v * 7) % 256, (v * 13) % 256) for v in range(256)]
