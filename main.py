from fastapi import FastAPI

from api.qrng import router as qrng_router

app = FastAPI(title="ANU QRNG client")

@app.get("/health")
def health():
    return {"ok": True}


app.include_router(qrng_router)   # /qrng/block
