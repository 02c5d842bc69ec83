from models import ArrayLength, BlockSize, Hex16, Hex8, Uint16, Uint8
from qrng.request import build_query, build_url

BASE = "https://api.quantumnumbers.anu.edu.au"


def test_uint_url_has_no_size():
    assert build_url(Uint16(), ArrayLength(5), base_url=BASE) == f"{BASE}?length=5&type=uint16"
    assert build_url(Uint8(), ArrayLength(1024), base_url=BASE) == f"{BASE}?length=1024&type=uint8"


def test_hex_url_has_size():
    url = build_url(Hex16(block_size=BlockSize(4)), ArrayLength(5), base_url=BASE)
    assert url == f"{BASE}?length=5&type=hex16&size=4"


def test_query_order():
    q = build_query(Hex8(block_size=BlockSize(10)), ArrayLength(1))
    assert list(q.items()) == [("length", 1), ("type", "hex8"), ("size", 10)]


def test_default_base_from_settings():
    assert build_url(Uint8(), ArrayLength(2)).startswith(BASE + "?")
