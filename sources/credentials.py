import logging
from typing import Callable

from settings import settings
from qrng.errors import ErrorKind, QrngError

logger = logging.getLogger(__name__)

# любой callable без аргументов, возвращающий ключ строкой
KeyProvider = Callable[[], str]


def settings_key_provider() -> str:
    return settings.QRNG_API_KEY


def static_key_provider(key: str) -> KeyProvider:
    return lambda: key


def resolve_api_key(provider: KeyProvider) -> str:
    """Достаёт ключ у провайдера; любая его ошибка или пустой ключ -> CREDENTIAL_UNAVAILABLE."""
    try:
        key = provider()
    except Exception as e:
        logger.warning("qrng api key provider failed: %s", e)
        raise QrngError(ErrorKind.CREDENTIAL_UNAVAILABLE, f"failed to obtain qrng api key: {e}") from e

    if not isinstance(key, str) or not key.strip():
        logger.warning("qrng api key is empty")
        raise QrngError(ErrorKind.CREDENTIAL_UNAVAILABLE, "qrng api key is empty")
    key = key.strip()
    # значение заголовка x-api-key уходит в ASCII
    if not key.isascii():
        logger.warning("qrng api key is not ascii")
        raise QrngError(ErrorKind.CREDENTIAL_UNAVAILABLE, "qrng api key contains non-ascii characters")
    return key
