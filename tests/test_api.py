import pytest
import pycolor


@pytest.mark.parametrize('name', pycolor.__all__)
def test_public_names(name):
    assert hasattr(pycolor, name)


@pytest.mark.parametrize('error', (
    pycolor.ChannelRangeError,
    pycolor.LaneShapeError,
    pycolor.BufferSizeError,
))
def test_errors_share_base(error):
    assert issubclass(error, pycolor.PyColorError)
    assert issubclass(error, ValueError)


def test_parser_to_gpu_flow():
    # packed document colors -> blended float colors -> gpu buffer and display
    start, end = pycolor.unpack_colors(bytes.fromhex('000000ff' 'ffffffff'))
    middle = start.to_normalized().lerp(end.to_normalized(), 0.5)
    assert middle.to_integer() == pycolor.ColorU(127, 127, 127, 255)
    assert repr(middle.to_integer()) == '#7f7f7f'
    assert pycolor.to_float_buffer([middle]).size == 4
