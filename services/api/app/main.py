"""Draft order relay service entrypoint."""

from fastapi import FastAPI, Request, Response

from services.api.app.routers.draft_order import router as draft_order_router

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

app = FastAPI(title="Draft Order Relay")

app.include_router(draft_order_router)


@app.middleware("http")
async def _cors(request: Request, call_next) -> Response:
    # Preflight on any path is answered here, before routing.
    if request.method == "OPTIONS":
        response = Response(status_code=200)
    else:
        response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
