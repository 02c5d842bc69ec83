import httpx
import pytest

from sources.anu_qrng import QrngClient
from sources.credentials import static_key_provider


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def make_client():
    def _make(handler, key="test-key", **kw):
        return QrngClient(api_url="https://qrng.test", key_provider=static_key_provider(key),
                          timeout=1.0, transport=httpx.MockTransport(handler), **kw)
    return _make
