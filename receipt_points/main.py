from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .routes.receipts import router as receipts_router
from .store import ScoreStore
from .utils.logging import logger

@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.store = ScoreStore()
    yield
    logger.info("Dropping %s stored receipt scores", len(app.state.store))
    app.state.store.clear()

app = FastAPI(title="Receipt Points",
              description="Scores purchase receipts and serves the points by id",
    version="0.1.0",
    docs_url="/docs",          # Swagger UI
    redoc_url="/redoc",        # ReDoc
    openapi_url="/openapi.json",
    lifespan=lifespan)

app.include_router(receipts_router)

# Undecodable or mistyped receipt bodies are a client error, not 422.
@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

@app.get("/health")
def health():
    return {"ok": True}
