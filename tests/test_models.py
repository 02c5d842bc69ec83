import pytest
from pydantic import TypeAdapter, ValidationError

from models import ArrayLength, BlockSize, DataType, Hex16, Hex8, QrngBlockIn, Uint8


@pytest.mark.parametrize("v", range(1, 11))
def test_block_size_in_range(v):
    assert BlockSize(v).value == v


@pytest.mark.parametrize("v", [0, -1, 11, 255])
def test_block_size_out_of_range_fails(v):
    with pytest.raises(ValidationError):
        BlockSize(v)


@pytest.mark.parametrize("v", [1, 2, 512, 1023, 1024])
def test_array_length_in_range(v):
    assert ArrayLength(v).value == v


@pytest.mark.parametrize("v", [0, -5, 1025, 65535])
def test_array_length_out_of_range_fails(v):
    with pytest.raises(ValidationError):
        ArrayLength(v)


@pytest.mark.parametrize("v", [True, "5", 5.0])
def test_bounded_rejects_non_int(v):
    with pytest.raises(ValidationError):
        ArrayLength(v)


def test_bounded_is_value_error_and_frozen():
    with pytest.raises(ValueError):
        BlockSize(42)
    bs = BlockSize(3)
    with pytest.raises(ValidationError):
        bs.value = 99
    assert int(bs) == 3


def test_data_type_from_json():
    dt = TypeAdapter(DataType).validate_python({"kind": "hex16", "block_size": 4})
    assert isinstance(dt, Hex16)
    assert dt.block_size == BlockSize(4)
    assert dt.type_name == "hex16" and dt.is_hex

    assert not Uint8().is_hex
    with pytest.raises(ValidationError):
        Hex8(block_size=11)
    with pytest.raises(ValidationError):
        TypeAdapter(DataType).validate_python({"kind": "ternary"})


def test_block_in_accepts_plain_length():
    body = QrngBlockIn.model_validate({"data_type": {"kind": "uint8"}, "length": 10})
    assert body.length == ArrayLength(10)
    with pytest.raises(ValidationError):
        QrngBlockIn.model_validate({"data_type": {"kind": "uint8"}, "length": 2000})
