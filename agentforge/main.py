from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from agentforge.api.v1.endpoints import router as v1_router
from agentforge.core.config import settings
from agentforge.errors import DraftValidationError, SessionExpiredError, SubmissionError
from agentforge.registry import default_registry
import logging
import json

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="AgentForge Agent Builder")
app.include_router(v1_router, prefix="/api/v1")

@app.on_event("startup")
async def startup_event():
    logger.info("Loading business categories...")
    default_registry()

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    body = None
    try:
        body = await request.json()
        logger.error(f"Validation Error Body: {json.dumps(body, indent=2)}")
    except Exception:
        logger.error("Validation Error: Could not parse body")

    logger.error(f"Validation Error Details: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors()), "body": body},
    )

@app.exception_handler(DraftValidationError)
async def draft_validation_handler(request: Request, exc: DraftValidationError):
    return JSONResponse(status_code=422, content={"detail": exc.errors})

@app.exception_handler(SessionExpiredError)
async def session_expired_handler(request: Request, exc: SessionExpiredError):
    return JSONResponse(
        status_code=401,
        content={"detail": "Session expired", "message": "Please log in again", "redirect": "/login"},
    )

@app.exception_handler(SubmissionError)
async def submission_error_handler(request: Request, exc: SubmissionError):
    return JSONResponse(
        status_code=502,
        content={"detail": "Failed to create agent", "message": str(exc), "status": exc.status_code},
    )

@app.get("/")
async def root():
    return {"message": "AgentForge Agent Builder Running"}
