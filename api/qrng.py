# api/qrng.py
from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from models import QrngBlockIn, QrngNumbers
from qrng.errors import ErrorKind, QrngError
from sources.anu_qrng import QrngClient

router = APIRouter()


def get_qrng_client() -> QrngClient:
    return QrngClient()


def _status_for(e: QrngError) -> int:
    # кривой ответ сервиса и транспорт -> проблема апстрима
    if e.is_decode_error or e.kind is ErrorKind.TRANSPORT_FAILURE:
        return 502
    return 503


@router.post("/qrng/block", response_model=QrngNumbers)
async def qrng_block(body: QrngBlockIn = Body(...), client: QrngClient = Depends(get_qrng_client)):
    try:
        return await client.get_block_async(body.data_type, body.length)
    except QrngError as e:
        return JSONResponse(status_code=_status_for(e), content={"error": e.message, "kind": e.kind.value})
