import logging

import requests
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse

from .capabilities import DiskSaver, share_target_from_settings
from .config import Settings, settings as default_settings
from .errors import InputError, PosterError, RequestError
from .page import INDEX_HTML
from .schemas import (
    ART_STYLE_LABELS,
    IMAGE_MODEL_LABELS,
    CredentialUpdate,
    ErrorResponse,
    FieldUpdate,
    Option,
    OptionsResponse,
    PosterStatus,
    ShareResponse,
)
from .workflow import PosterWorkflow

logger = logging.getLogger(__name__)


def build_workflow(settings: Settings) -> PosterWorkflow:
    return PosterWorkflow(
        api_key=settings.openai_api_key or "",
        model=settings.model_name,
        saver=DiskSaver(settings.download_dir),
        share_target=share_target_from_settings(settings),
    )


def _error_response(request: Request, err: PosterError, status_code: int) -> JSONResponse:
    workflow: PosterWorkflow = request.app.state.workflow
    body = ErrorResponse(detail=err.notification.description, poster=workflow.status())
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def create_app(settings: Settings = default_settings, workflow: PosterWorkflow | None = None) -> FastAPI:
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(title="AI Movie Poster Generator")
    app.state.workflow = workflow or build_workflow(settings)

    @app.exception_handler(InputError)
    async def input_error_handler(request: Request, err: InputError):
        return _error_response(request, err, 400)

    @app.exception_handler(RequestError)
    async def request_error_handler(request: Request, err: RequestError):
        return _error_response(request, err, 502)

    @app.get("/", response_class=HTMLResponse)
    def index():
        return INDEX_HTML

    @app.get("/api/health")
    def health_check():
        return {"status": "ok"}

    @app.get("/api/options")
    def get_options() -> OptionsResponse:
        return OptionsResponse(
            art_styles=[Option(value=s.value, label=label) for s, label in ART_STYLE_LABELS.items()],
            models=[Option(value=m.value, label=label) for m, label in IMAGE_MODEL_LABELS.items()],
        )

    @app.get("/api/poster")
    def get_poster(request: Request) -> PosterStatus:
        return request.app.state.workflow.status()

    @app.put("/api/poster/fields")
    def update_field(update: FieldUpdate, request: Request) -> PosterStatus:
        workflow = request.app.state.workflow
        workflow.update_field(update.field, update.value)
        return workflow.status()

    @app.put("/api/poster/credential")
    def update_credential(update: CredentialUpdate, request: Request) -> PosterStatus:
        workflow = request.app.state.workflow
        workflow.set_credential(update.api_key)
        return workflow.status()

    @app.post("/api/poster/generate")
    async def generate_poster(request: Request) -> PosterStatus:
        workflow = request.app.state.workflow
        if workflow.busy:
            body = ErrorResponse(detail="A poster is already being generated", poster=workflow.status())
            return JSONResponse(status_code=409, content=body.model_dump(mode="json"))
        await workflow.submit()
        return workflow.status()

    @app.get("/api/poster/download")
    def download_poster(request: Request):
        workflow = request.app.state.workflow
        try:
            saved = workflow.download()
        except requests.RequestException as e:
            logger.error("Could not download poster: %s", e)
            raise HTTPException(status_code=502, detail="Could not download the poster")
        if saved is None:
            raise HTTPException(status_code=404, detail="No poster generated yet")
        path, filename = saved
        return FileResponse(path, media_type="image/png", filename=filename)

    @app.post("/api/poster/share")
    def share_poster(request: Request) -> ShareResponse:
        return ShareResponse(shared=request.app.state.workflow.share())

    return app


app = create_app()
