"""Main FastAPI application."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from residency.config import settings
from residency.rate_limiter import limiter
from residency.schemas.common import ErrorDetail, ErrorResponse
from residency.services.exceptions import ValidationError

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Residency Eligibility API",
    description="Physical-presence eligibility calculations for residency status changes",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Add rate limiter to app state and exception handler
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
async def profile_validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Report unusable profile data as a 422 with the offending field."""
    logger.warning(f"Rejected profile data on {request.url.path}: {exc}")
    error = ErrorResponse(
        error="ValidationError",
        message=str(exc),
        details=[ErrorDetail(field=exc.field, message=exc.message)],
        path=request.url.path,
    )
    return JSONResponse(
        status_code=422,
        content=error.model_dump(mode="json"),
    )


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Residency Eligibility API", "version": "0.1.0", "status": "running"}


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# Import and include routers
from residency.routers import eligibility

app.include_router(eligibility.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, reload=True)
