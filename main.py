from fastapi import FastAPI, Query, status
import os
import logging
from datetime import datetime
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.middleware.cors import CORSMiddleware

from file_processing import FileProcessor, NthMinimumRequest, NthMinimumResponse
from settings import get_settings

settings = get_settings()

# Create logs directory if it doesn't exist
log_dir = settings.log_dir
os.makedirs(log_dir, exist_ok=True)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format=LOG_FORMAT
)
logger = logging.getLogger(__name__)

# Daily log file shared by every module logger
log_file_path = os.path.join(log_dir, f"app_{datetime.now().strftime('%Y%m%d')}.log")
file_handler = logging.FileHandler(log_file_path)
file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
logging.getLogger().addHandler(file_handler)


ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {
        "description": "Any failure: missing or unreadable workbook, no numbers, rank out of range",
        "content": {"text/plain": {"schema": {"type": "string", "example": "Error: N must be between 1 and 7"}}},
    },
}


# Initialize FastAPI app with metadata
app = FastAPI(
    title=settings.app_title,
    description=settings.app_description,
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# API Endpoints
@app.get(
    "/api/find-nth-min",
    tags=["N-th Minimum"],
    summary="Find Nth minimum number from Excel file",
    response_model=int,
    responses=ERROR_RESPONSES
)
def find_nth_min(
    file_path: str = Query(..., alias="filePath", description="Path to local Excel file"),
    n: int = Query(..., description="N-th minimum number to find")
):
    """
    Return the n-th smallest integer in the first column of the workbook's first sheet.

    Numeric cells are truncated to integers, date cells count as their Excel
    serial number and text cells holding a plain integer are parsed; formula,
    boolean and blank cells are skipped.

    Returns:
        int: The n-th minimum on success. Every failure is answered with
        400 and a plain-text body "Error: <message>".
    """
    logger.info(f"Received n-th minimum request for {file_path} with n={n}")

    result = FileProcessor.find_nth_minimum(NthMinimumRequest(file_path=file_path, n=n))

    if result.is_failure():
        return PlainTextResponse(status_code=status.HTTP_400_BAD_REQUEST, content=result.error_message())
    return result.data.result


@app.get(
    "/api/find-nth-min/details",
    tags=["N-th Minimum"],
    summary="Find Nth minimum number with lookup details",
    response_model=NthMinimumResponse,
    responses={
        code: {"model": NthMinimumResponse}
        for code in (status.HTTP_400_BAD_REQUEST, status.HTTP_404_NOT_FOUND, status.HTTP_500_INTERNAL_SERVER_ERROR)
    }
)
def find_nth_min_details(
    file_path: str = Query(..., alias="filePath", description="Path to local Excel file"),
    n: int = Query(..., description="N-th minimum number to find")
):
    """
    Same lookup as ``/api/find-nth-min`` but answered with a full envelope:
    success flag, status, requested rank, result and how many numbers were read.

    Failures keep their own status code: 404 for a missing workbook, 400 for
    unusable data or rank, 500 for unexpected errors.
    """
    result = FileProcessor.find_nth_minimum(NthMinimumRequest(file_path=file_path, n=n))

    if result.is_success():
        return result.data

    response = NthMinimumResponse(
        success=False,
        status_code=result.status_code.value,
        status=result.status_code.phrase,
        n=n,
        error=result.error
    )
    return JSONResponse(status_code=result.status_code.value, content=response.model_dump())


@app.get("/health", tags=["System"])
async def health():
    """Liveness probe."""
    return {"status": "ok", "service": settings.app_title, "version": settings.app_version}


def run():
    """Start the API server with the configured host and port."""
    import uvicorn
    logger.info(f"Starting N-Min Finder API on {settings.host}:{settings.port}")
    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.reload)


# Run the application if executed directly
if __name__ == "__main__":
    run()
