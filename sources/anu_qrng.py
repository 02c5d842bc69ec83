# sources/anu_qrng.py
import logging
import httpx
from typing import Any

from settings import settings
from models import ArrayLength, DataType, QrngNumbers
from qrng.decode import decode_response
from qrng.errors import ErrorKind, QrngError
from qrng.request import build_url
from sources.credentials import KeyProvider, resolve_api_key, settings_key_provider

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-api-key"


class QrngClient:
    """
    Клиент JSON API ANU QRNG: URL -> GET с x-api-key -> decode_response.
    Состояния нет, кроме конфигурации; для параллельных запросов хватит отдельных экземпляров.
    Ретраев нет, все ошибки наружу как QrngError.
    """

    def __init__(self, api_url: str | None = None, key_provider: KeyProvider = settings_key_provider,
                 timeout: float | None = None, transport: httpx.BaseTransport | httpx.AsyncBaseTransport | None = None):
        self.api_url = api_url or settings.QRNG_API_URL
        self.key_provider = key_provider
        self.timeout = settings.QRNG_TIMEOUT if timeout is None else timeout
        # подмена транспорта (httpx.MockTransport в тестах)
        self.transport = transport

    def _prepare(self, data_type: DataType, array_length: ArrayLength) -> tuple[str, dict[str, str]]:
        key = resolve_api_key(self.key_provider)
        url = build_url(data_type, array_length, base_url=self.api_url)
        logger.debug("qrng request: GET %s", url)
        return url, {API_KEY_HEADER: key}

    @staticmethod
    def _parse(r: httpx.Response) -> Any:
        try:
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("qrng http error: %s", e)
            raise QrngError(ErrorKind.TRANSPORT_FAILURE, f"qrng http status {r.status_code}") from e
        try:
            return r.json()
        except ValueError as e:
            logger.warning("qrng response is not json: %s", e)
            raise QrngError(ErrorKind.TRANSPORT_FAILURE, "qrng response body is not json") from e

    def get_block(self, data_type: DataType, array_length: ArrayLength) -> QrngNumbers:
        url, headers = self._prepare(data_type, array_length)
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as cli:
                r = cli.get(url, headers=headers)
        except httpx.HTTPError as e:
            logger.warning("qrng request failed: %s", e)
            raise QrngError(ErrorKind.TRANSPORT_FAILURE, f"qrng request failed: {e}") from e
        return decode_response(self._parse(r))

    async def get_block_async(self, data_type: DataType, array_length: ArrayLength) -> QrngNumbers:
        url, headers = self._prepare(data_type, array_length)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as cli:
                r = await cli.get(url, headers=headers)
        except httpx.HTTPError as e:
            logger.warning("qrng request failed: %s", e)
            raise QrngError(ErrorKind.TRANSPORT_FAILURE, f"qrng request failed: {e}") from e
        return decode_response(self._parse(r))
