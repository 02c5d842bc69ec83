from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator
from typing import Annotated, Any, Literal, Union

BLOCK_SIZE_MIN, BLOCK_SIZE_MAX = 1, 10
ARRAY_LENGTH_MIN, ARRAY_LENGTH_MAX = 1, 1024


class _Bounded(BaseModel):
    """
    Целое в фиксированных границах. Проверка только при создании:
    вне диапазона -> ValidationError (это ValueError), без клампинга.
    Принимает и голое число, и {"value": n}.
    """
    model_config = ConfigDict(frozen=True)

    value: StrictInt

    def __init__(self, value: int, **data: Any) -> None:
        super().__init__(value=value, **data)

    @model_validator(mode="before")
    @classmethod
    def _wrap_plain_int(cls, data: Any) -> Any:
        if isinstance(data, int) and not isinstance(data, bool):
            return {"value": data}
        return data

    def __int__(self) -> int:
        return self.value


class BlockSize(_Bounded):
    """Сколько hex-цифр в одном значении (hex8/hex16)."""
    value: StrictInt = Field(ge=BLOCK_SIZE_MIN, le=BLOCK_SIZE_MAX)


class ArrayLength(_Bounded):
    """Сколько значений просим у сервиса."""
    value: StrictInt = Field(ge=ARRAY_LENGTH_MIN, le=ARRAY_LENGTH_MAX)


# --- тип запрашиваемых данных ---

class _DataTypeBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def type_name(self) -> str:
        # совпадает с query-параметром type
        return self.kind

    @property
    def is_hex(self) -> bool:
        return False

class Uint8(_DataTypeBase):
    kind: Literal["uint8"] = "uint8"

class Uint16(_DataTypeBase):
    kind: Literal["uint16"] = "uint16"

class _HexBase(_DataTypeBase):
    block_size: BlockSize

    @property
    def is_hex(self) -> bool:
        return True

class Hex8(_HexBase):
    kind: Literal["hex8"] = "hex8"

class Hex16(_HexBase):
    kind: Literal["hex16"] = "hex16"

DataType = Annotated[Union[Uint8, Uint16, Hex8, Hex16], Field(discriminator="kind")]


# --- декодированный ответ ---

U8 = Annotated[int, Field(ge=0, le=0xFF)]
U16 = Annotated[int, Field(ge=0, le=0xFFFF)]

class Uint8Sequence(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["uint8"] = "uint8"
    values: list[U8]

class Uint16Sequence(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["uint16"] = "uint16"
    values: list[U16]

class HexSequence(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["hex"] = "hex"
    values: list[str]

QrngNumbers = Annotated[Union[Uint8Sequence, Uint16Sequence, HexSequence], Field(discriminator="kind")]


class QrngBlockIn(BaseModel):
    data_type: DataType = Field(..., description='напр. {"kind": "hex16", "block_size": 4}')
    length: ArrayLength = Field(..., description="1..1024")
