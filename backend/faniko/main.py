# -------------------------------------------------
# STANDARD IMPORTS
# -------------------------------------------------
import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from faniko import config
from faniko.services.media_service import ensure_uploads_dir

# -------------------------------------------------
# ROUTERS
# -------------------------------------------------
from faniko.routes.auth_routes import router as auth_router
from faniko.routes.creator_routes import router as creator_router
from faniko.routes.post_routes import router as post_router
from faniko.routes.payment_routes import router as payment_router

# -------------------------------------------------
# LOGGING SETUP
# -------------------------------------------------
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("faniko-backend")

# -------------------------------------------------
# FASTAPI APP
# -------------------------------------------------
app = FastAPI(
    title="Faniko API",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -------------------------------------------------
# ERROR SHAPE: {"error": "..."} (what the frontend reads)
# -------------------------------------------------
@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("⚠️ Invalid request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body."},
    )

# -------------------------------------------------
# UPLOADS (KYC files + post media, served statically)
# -------------------------------------------------
ensure_uploads_dir()
app.mount("/uploads", StaticFiles(directory=str(config.UPLOADS_DIR)), name="uploads")

# -------------------------------------------------
# API ROUTERS
# -------------------------------------------------
app.include_router(auth_router)
app.include_router(creator_router)
app.include_router(post_router)
app.include_router(payment_router)

# -------------------------------------------------
# TELEGRAM WEBHOOK (ONLY WHEN A BOT TOKEN IS SET)
# -------------------------------------------------
telegram_app = None

if config.TELEGRAM_BOT_TOKEN:
    from faniko.routes.telegram_webhook import build_webhook_router

    telegram_router, telegram_app = build_webhook_router(config.TELEGRAM_BOT_TOKEN)
    app.include_router(telegram_router)

# -------------------------------------------------
# STARTUP / SHUTDOWN LIFECYCLE
# -------------------------------------------------
@app.on_event("startup")
async def startup_event():
    logger.info("🚀 Startup event triggered")
    ensure_uploads_dir()
    logger.info("📁 Uploads dir: %s", config.UPLOADS_DIR)

    if telegram_app is not None:
        try:
            await telegram_app.initialize()
            logger.info("🤖 Telegram bot initialized")
        except Exception as e:
            logger.error(f"❌ Telegram init failed: {e}")


@app.on_event("shutdown")
async def shutdown_event():
    if telegram_app is not None:
        try:
            await telegram_app.shutdown()
            logger.info("🛑 Telegram bot shutdown")
        except Exception as e:
            logger.error(f"❌ Telegram shutdown failed: {e}")

# -------------------------------------------------
# ROOT + HEALTH CHECK (NO STATE REQUIRED)
# -------------------------------------------------
@app.get("/", response_class=PlainTextResponse)
def root():
    return (
        "Faniko API is running. Try GET /api/creators, POST /api/creators, "
        "or GET /api/creators/:username/posts"
    )


@app.get("/health", status_code=status.HTTP_200_OK)
def health():
    return {"status": "ok"}


# -------------------------------------------------
# ENTRYPOINT (faniko-api)
# -------------------------------------------------
def run():
    logger.info(f"Faniko backend running on http://{config.HOST}:{config.PORT}")
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
