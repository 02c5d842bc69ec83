from settings import settings
from models import ArrayLength, DataType


def build_query(data_type: DataType, array_length: ArrayLength) -> dict[str, int | str]:
    """Параметры в порядке length, type, size (size только для hex8/hex16)."""
    params: dict[str, int | str] = {
        "length": array_length.value,
        "type": data_type.type_name,
    }
    if data_type.is_hex:
        params["size"] = data_type.block_size.value
    return params


def build_url(data_type: DataType, array_length: ArrayLength, base_url: str | None = None) -> str:
    base = base_url or settings.QRNG_API_URL
    query = "&".join(f"{k}={v}" for k, v in build_query(data_type, array_length).items())
    return f"{base}?{query}"
