"""
FastAPI application - Main entry point

Run with:
  uvicorn src.api.main:app --host 0.0.0.0 --port 5000
or
  python -m src.api.main
"""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from src.api.endpoints.payments import payments_api
from src.error_handler import ErrorHandler
from src.integrations.policy.response_wrappers import AirtelIntegrationError
from src.utils.config_loader import load_server_config

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Airtel Money Payments API",
    description="Proxies payment requests to the Airtel Money Open API",
    version="1.0.0",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

error_handler = ErrorHandler()

# Register payments API router
app.include_router(payments_api, prefix="/api", tags=["Payments"])


# ============================================================================
# ERROR HANDLERS
# ============================================================================
@app.exception_handler(AirtelIntegrationError)
async def airtel_error_handler(request: Request, exc: AirtelIntegrationError):
    body = error_handler.handle_exception(exc, context={"path": request.url.path})
    return JSONResponse(status_code=500, content=body)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    body = error_handler.handle_exception(exc, context={"path": request.url.path})
    return JSONResponse(status_code=500, content=body)


# ============================================================================
# ENDPOINTS
# ============================================================================
@app.get("/", tags=["Health"], response_class=PlainTextResponse)
async def root():
    """Health check endpoint."""
    return "Airtel backend running!"


# ============================================================================
# STARTUP/SHUTDOWN EVENTS
# ============================================================================
@app.on_event("startup")
async def startup_event():
    logger.info("Starting Airtel Money Payments API...")


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down Airtel Money Payments API...")


if __name__ == "__main__":
    import uvicorn

    server = load_server_config()
    logger.info("Airtel backend listening on http://%s:%s", server.host, server.port)
    uvicorn.run(app, host=server.host, port=server.port)
