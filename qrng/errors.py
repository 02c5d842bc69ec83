from enum import Enum


class ErrorKind(str, Enum):
    INVALID_FORMAT = "invalid_format"                  # ответ не той формы
    UNSUCCESSFUL_REQUEST = "unsuccessful_request"      # success: false
    NUMBER_OUT_OF_RANGE = "number_out_of_range"        # число не влезает в uint8/uint16
    UNKNOWN_DATA_TYPE = "unknown_data_type"            # type не из uint8/uint16/hex8/hex16
    CREDENTIAL_UNAVAILABLE = "credential_unavailable"  # нет API-ключа
    TRANSPORT_FAILURE = "transport_failure"            # сеть, статус, не-JSON тело


DEFAULT_MESSAGES = {
    ErrorKind.INVALID_FORMAT: "invalid json response",
    ErrorKind.UNSUCCESSFUL_REQUEST: "json success property is false",
    ErrorKind.NUMBER_OUT_OF_RANGE: "a number in the data does not fit the type implied by the type property",
    ErrorKind.UNKNOWN_DATA_TYPE: "unrecognized data type in type property",
    ErrorKind.CREDENTIAL_UNAVAILABLE: "qrng api key is not available",
    ErrorKind.TRANSPORT_FAILURE: "qrng request failed",
}

# ошибки формы/содержимого ответа (в отличие от ключа и сети)
DECODE_KINDS = frozenset({
    ErrorKind.INVALID_FORMAT,
    ErrorKind.UNSUCCESSFUL_REQUEST,
    ErrorKind.NUMBER_OUT_OF_RANGE,
    ErrorKind.UNKNOWN_DATA_TYPE,
})


class QrngError(Exception):
    """
    Единая ошибка клиента QRNG с тегом kind.
    Исходная ошибка (httpx, json, провайдер ключа) цепляется через `raise ... from e`.
    """

    def __init__(self, kind: ErrorKind, message: str | None = None):
        self.kind = kind
        self.message = message or DEFAULT_MESSAGES[kind]
        super().__init__(self.message)

    @property
    def is_decode_error(self) -> bool:
        return self.kind in DECODE_KINDS

    def __repr__(self) -> str:
        return f"QrngError({self.kind.value!r}, {self.message!r})"
