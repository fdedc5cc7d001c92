# api/main.py
import logging
import os

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from core.exceptions import LendingError, InvalidInput
from core.sa.database import db
from api.routes import books, feedbacks
from api.schemas.common import ErrorResponse

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Lending Library API")

# CORS configuration
DEFAULT_ORIGINS = "http://localhost:5173,http://localhost:4173,http://127.0.0.1:5173"
origins = [origin.strip() for origin in os.getenv("CORS_ORIGINS", DEFAULT_ORIGINS).split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Schema and required roles must exist before the first request
@app.on_event("startup")
async def startup_event():
    db.init_db()

@app.exception_handler(LendingError)
async def lending_error_handler(request: Request, exc: LendingError):
    logger.debug(f"{request.method} {request.url.path} failed: {exc.code} {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(code=exc.code, message=exc.message).model_dump()
    )

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    message = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(code=InvalidInput.code, message=message).model_dump()
    )

app.include_router(books.router)
app.include_router(feedbacks.router)

@app.get("/")
async def root():
    return {"message": "Lending Library API"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("api.main:app", host="0.0.0.0", port=8000, reload=True)
