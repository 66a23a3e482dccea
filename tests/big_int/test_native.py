import pytest

from bigint import BigIntOverflowError, InvalidArgumentError
from bigint.big_int import NativeOperand, check_native, native_abs, native_range, split_native


class Int8:
    def __init__(self, value: int) -> None:
        self._value = value

    def __index__(self) -> int:
        return self._value


def test_split_native_widens_minimum_values():
    assert split_native(-(2**63)) == NativeOperand(True, 2**63)
    assert split_native(Int8(-128)) == NativeOperand(True, 128)
    assert split_native(0) == NativeOperand(False, 0)
    assert split_native(True) == NativeOperand(False, 1)


def test_native_operand_value():
    assert NativeOperand(True, 5).value == -5
    assert NativeOperand(False, 5).value == 5


@pytest.mark.parametrize("value", [1.0, "1", b"1", None, [1]])
def test_split_native_ignores_non_integers(value):
    assert split_native(value) is None


def test_native_range():
    assert native_range(8) == (-128, 127)
    assert native_range(8, signed=False) == (0, 255)
    assert native_range(64) == (-(2**63), 2**63 - 1)
    with pytest.raises(InvalidArgumentError):
        native_range(128)


def test_check_native():
    assert check_native(255, 8, signed=False) == 255
    with pytest.raises(BigIntOverflowError):
        check_native(256, 8, signed=False)
    with pytest.raises(BigIntOverflowError):
        check_native(-1, 8, signed=False)


def test_native_abs_of_minimum_overflows():
    assert native_abs(-5, 8) == 5
    assert native_abs(-(2**63) + 1) == 2**63 - 1
    with pytest.raises(BigIntOverflowError):
        native_abs(-128, 8)
    with pytest.raises(OverflowError):
        native_abs(-(2**63))
