# app.py
import os, sys, logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.concurrency import run_in_threadpool
from mangum import Mangum
from starlette.exceptions import HTTPException as StarletteHTTPException

from proxy_core.errors import err_method_not_allowed
from proxy_core.handler import ProxyHandler


def setup_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


setup_logging()

app = FastAPI(title="Typhoon API Proxy")

proxy = ProxyHandler()

# Common methods are routed so the handler produces their 405 body.
ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

# =========================
# Errors
# =========================
@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # Verbs outside ALL_METHODS are rejected by the router before reaching the handler.
    if exc.status_code == 405:
        error = err_method_not_allowed()
        return JSONResponse(status_code=error.status_code, content=error.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=exc.headers)

# =========================
# Routes
# =========================
@app.get("/health")
def health():
    return {"ok": True}

@app.api_route("/api/proxy", methods=ALL_METHODS)
@app.api_route("/.netlify/functions/api-proxy", methods=ALL_METHODS)
async def api_proxy(request: Request):
    """
    POST {"prompt": "..."} → {"response": "..."}; every other outcome is a
    fixed {"error": "..."} body with its status code.
    """
    body = await request.body()
    result = await run_in_threadpool(proxy.handle, request.method, body)
    return JSONResponse(status_code=result.status_code, content=result.body)

# Entry point for Lambda-style serverless runtimes
handler = Mangum(app)

if __name__ == "__main__":
    import uvicorn

    port = int(os.environ.get("PORT", 8000))
    uvicorn.run("app:app", host="0.0.0.0", port=port)
