import json

import httpx


def json_handler(payload, status_code=200, seen=None):
    """MockTransport-обработчик: отдаёт payload и запоминает запросы в seen."""
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, content=json.dumps(payload).encode(),
                              headers={"content-type": "application/json"})
    return handler
