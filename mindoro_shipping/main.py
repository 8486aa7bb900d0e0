from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from .config import settings
from .errors import ShippingCalcError
from .routers import shipping

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("mindoro_shipping")

app = FastAPI(
    title=settings.APP_NAME,
    description="Shipping fee calculator for the J&T Oriental Mindoro lane",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(shipping.router, prefix="/api")


@app.exception_handler(ShippingCalcError)
def shipping_calc_error_handler(request: Request, exc: ShippingCalcError):
    """Validation and manual-quote outcomes go back in the checkout's error envelope."""
    logger.info("%s %s -> %s", request.method, request.url.path, exc.code.value)
    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "error": exc.message,
            "issue": exc.code.value,
            "details": exc.details,
        },
    )


@app.get("/health")
def health():
    return {"status": "ok", "app": settings.APP_NAME}
