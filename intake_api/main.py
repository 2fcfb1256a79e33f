"""FastAPI application entrypoint for intake-api."""
import logging
import os
from typing import Dict

from dotenv import load_dotenv
from fastapi import FastAPI

# Load environment variables from .env file
load_dotenv()

from .presentation.dtos.errors import create_internal_error_response  # noqa: E402
from .presentation.routers.submission_router import router as submission_router  # noqa: E402

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
# Reduce pika logging to WARNING to reduce noise
logging.getLogger('pika').setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

app = FastAPI(title="intake-api")

app.include_router(submission_router)


@app.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/")
async def root() -> Dict[str, str]:
    return {"service": "file-intake", "status": "ok"}


@app.exception_handler(Exception)
async def general_exception_handler(request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.error(f"Unexpected error: {exc}")
    return create_internal_error_response()


def run() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        app,
        host=os.getenv("INTAKE_API_HOST", "0.0.0.0"),
        port=int(os.getenv("INTAKE_API_PORT", "8000")),
        reload=False,
        log_level="info",
    )


if __name__ == "__main__":
    run()
