from typing import Any

from models import HexSequence, QrngNumbers, Uint8Sequence, Uint16Sequence
from qrng.errors import ErrorKind, QrngError

UINT_LIMITS = {"uint8": 0xFF, "uint16": 0xFFFF}
HEX_TYPES = ("hex8", "hex16")


def _uint_values(values: list, limit: int) -> list[int]:
    out: list[int] = []
    for v in values:
        # bool в Python это int, а JSON-float (3.0) не целое для сервиса
        if isinstance(v, bool) or not isinstance(v, int) or v < 0:
            raise QrngError(ErrorKind.INVALID_FORMAT, f"not a non-negative integer: {v!r}")
        if v > limit:
            raise QrngError(ErrorKind.NUMBER_OUT_OF_RANGE, f"{v} does not fit in 0..{limit}")
        out.append(v)
    return out


def _hex_values(values: list) -> list[str]:
    # содержимое строк не проверяем: ни hex-цифры, ни ширину блока
    for v in values:
        if not isinstance(v, str):
            raise QrngError(ErrorKind.INVALID_FORMAT, f"not a hex string: {v!r}")
    return list(values)


def decode_response(payload: Any) -> QrngNumbers:
    """
    Разбор уже распарсенного JSON ответа ANU QRNG:
    {"success": true, "type": "uint16", "length": "5", "data": [...]}.

    Возвращает Uint8Sequence / Uint16Sequence / HexSequence (порядок data сохраняется)
    либо бросает QrngError. Чистая функция, payload не меняется.
    """
    if not isinstance(payload, dict):
        raise QrngError(ErrorKind.INVALID_FORMAT, "top-level json value is not an object")

    success = payload.get("success")
    if not isinstance(success, bool):
        raise QrngError(ErrorKind.INVALID_FORMAT, "missing or non-boolean 'success'")
    if not success:
        raise QrngError(ErrorKind.UNSUCCESSFUL_REQUEST)

    type_of_data = payload.get("type")
    if not isinstance(type_of_data, str):
        raise QrngError(ErrorKind.INVALID_FORMAT, "missing or non-string 'type'")
    values = payload.get("data")
    if not isinstance(values, list):
        raise QrngError(ErrorKind.INVALID_FORMAT, "missing or non-array 'data'")

    if type_of_data == "uint8":
        return Uint8Sequence(values=_uint_values(values, UINT_LIMITS["uint8"]))
    if type_of_data == "uint16":
        return Uint16Sequence(values=_uint_values(values, UINT_LIMITS["uint16"]))
    if type_of_data in HEX_TYPES:
        return HexSequence(values=_hex_values(values))

    raise QrngError(ErrorKind.UNKNOWN_DATA_TYPE, f"unrecognized data type: {type_of_data!r}")
