from investours.middleware.logging_middleware import setup_logging
setup_logging()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from investours.api.scam_detection import router as scam_detection_router
from investours.api.financial_tutor import router as financial_tutor_router
from investours.api.search_logs import router as search_logs_router
from investours.middleware.error_handler import register_exception_handlers
from investours.middleware.logging_middleware import logging_middleware
from investours.middleware.observability import TracingMiddleware
from investours.middleware.rate_limit import limiter
from investours.services.metrics_service import metrics_endpoint
from investours.config import settings


app = FastAPI(
    title="Investours AI Services",
    version=settings.VERSION_MANIFEST["api"],
    docs_url="/docs"
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
register_exception_handlers(app)

app.add_middleware(TracingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)

app.middleware("http")(logging_middleware)

@app.get("/health")
def health_check():
    return {"status": "healthy", "version": settings.VERSION_MANIFEST["api"], "model": settings.AI_MODEL}

@app.get("/metrics")
def get_metrics():
    return metrics_endpoint()

app.include_router(scam_detection_router)
app.include_router(financial_tutor_router)
app.include_router(search_logs_router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
