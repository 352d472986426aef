from typing import Any

from fastapi import APIRouter, FastAPI, File, Form, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from email_validation.api.dependencies import HandlerDep, build_lifespan
from email_validation.api.middleware import log_requests
from email_validation.config import Settings, settings
from email_validation.dto import HealthCheckResponse, ValidationResponse

API_TITLE = "Email Validation API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "API for validating and comparing emails from two different sources"

router = APIRouter(prefix="/api/v1", tags=["emails"])


@router.post("/validate-emails", response_class=FileResponse)
async def validate_emails(
    handler: HandlerDep,
    first_file: UploadFile | None = File(None, description="First CSV/Excel file containing emails"),
    second_file: UploadFile | None = File(None, description="Second CSV/Excel file containing emails"),
    output_format: str = Form("csv", description="Output format (csv or excel)"),
) -> FileResponse:
    """
    Validate and compare the emails of two uploaded files.

    Returns:
        The comparison report as a CSV or Excel download.
    """
    return await handler.validate_emails(first_file, second_file, output_format)


@router.post("/compare-emails", response_model=ValidationResponse)
async def compare_emails(
    handler: HandlerDep,
    first_file: UploadFile | None = File(None, description="First CSV/Excel file containing emails"),
    second_file: UploadFile | None = File(None, description="Second CSV/Excel file containing emails"),
    output_format: str = Form("csv", description="Output format (csv or excel)"),
) -> ValidationResponse:
    """
    Validate and compare the emails of two uploaded files.

    Returns:
        Matching / missing address lists, summary and a report download link.
    """
    return await handler.compare_emails(first_file, second_file, output_format)


@router.get("/download/{filename}", response_class=FileResponse)
async def download_file(filename: str, handler: HandlerDep) -> FileResponse:
    """Download a previously generated report."""
    return await handler.download(filename)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        app_settings: Settings to run with. Defaults to the environment settings.

    Returns:
        Configured FastAPI app
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=API_VERSION,
        lifespan=build_lifespan(app_settings),
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": API_TITLE,
            "version": API_VERSION,
            "description": API_DESCRIPTION,
            "endpoints": {
                "validate": "/api/v1/validate-emails",
                "compare": "/api/v1/compare-emails",
                "download": "/api/v1/download/{filename}",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return await handler.health_check()

    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "email_validation.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
