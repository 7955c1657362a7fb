import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from wildwatch.core.config import settings
from wildwatch.core.database import init_db
from wildwatch.api import incidents

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
logger = logging.getLogger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🛠️  Initializing Database...")
    init_db()

    logger.info(f"🚀 Wildwatch ready (env={settings.ENV_STATE}, extraction={settings.LLM_MODE})")
    yield
    logger.info("🛑 Shutting down...")


app = FastAPI(title="Wildwatch Incident Triage", lifespan=lifespan)


# 스키마 불일치 (Validation Error) -> 400 Bad Request 변환
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    error_details = exc.errors()
    logger.warning(f"⚠️ Validation Error: {error_details}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "ValidationError",
            "message": "Invalid request schema",
            "details": [
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in error_details
            ],
        },
    )


# 컨트롤러가 dict detail 을 주면 그대로 본문으로 사용
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = {"error": "HTTPError", "message": str(exc.detail)}
    return JSONResponse(status_code=exc.status_code, content=content)


# 알 수 없는 서버 에러 -> 500 처리 (로그 남김)
@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error(f"❌ Server Error: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal Server Error", "message": "An unexpected error occurred"},
    )


app.include_router(incidents.router)


@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV_STATE}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
