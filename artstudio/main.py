import logging
import uuid
from typing import Any, Optional

from fastapi import Depends, FastAPI, Header, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import (
    ARTISTIC_MOVEMENTS,
    COLOR_MOODS,
    DEFAULT_STYLE_STRENGTH,
    HISTORY_CAPACITY,
    LOG_LEVEL,
    SESSION_HEADER,
    cors_origins,
)
from .schemas import ArtGenerationSuccess, HistoryResponse, OptionsResponse
from .services.history import HistoryStore
from .services.orchestrator import ArtStudio, PipelineStage

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Abstract Art Studio API", version="1.0.0")

# Basic CORS to allow calls from a separate front end.
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[SESSION_HEADER],
)

art_studio = ArtStudio()
history_store = HistoryStore(HISTORY_CAPACITY)


def get_art_studio() -> ArtStudio:
    return art_studio


def get_history_store() -> HistoryStore:
    return history_store


async def _read_json(request: Request) -> Any:
    """Decoded JSON body, or None when the body is not JSON. Shape checks happen in the pipeline."""
    try:
        return await request.json()
    except ValueError:
        return None


@app.post("/generate")
async def generate_art(
    request: Request,
    session_id: Optional[str] = Header(None, alias=SESSION_HEADER),
    studio: ArtStudio = Depends(get_art_studio),
    store: HistoryStore = Depends(get_history_store),
) -> JSONResponse:
    session_id = session_id or uuid.uuid4().hex
    payload = await _read_json(request)
    try:
        result = await studio.generate(payload)
    except Exception as exc:
        logger.exception("Unexpected error during art generation")
        raise HTTPException(status_code=500, detail="Unexpected error during art generation") from exc

    if isinstance(result, ArtGenerationSuccess):
        store.for_session(session_id).record(result.art_data_uri)
        status_code = 200
    elif result.stage == PipelineStage.VALIDATING.value:
        status_code = 422
    else:
        # The image or text model failed upstream.
        status_code = 502

    return JSONResponse(
        status_code=status_code,
        content=result.model_dump(by_alias=True),
        headers={SESSION_HEADER: session_id},
    )


@app.get("/history", response_model=HistoryResponse)
async def get_history(
    session_id: str = Header(..., alias=SESSION_HEADER),
    store: HistoryStore = Depends(get_history_store),
) -> HistoryResponse:
    history = store.get(session_id)
    return HistoryResponse(entries=history.entries() if history else [])


@app.delete("/history", status_code=204)
async def clear_history(
    session_id: str = Header(..., alias=SESSION_HEADER),
    store: HistoryStore = Depends(get_history_store),
) -> Response:
    history = store.get(session_id)
    if history is not None:
        history.clear()
    return Response(status_code=204)


@app.get("/options", response_model=OptionsResponse)
async def get_options() -> OptionsResponse:
    return OptionsResponse(
        artistic_movements=list(ARTISTIC_MOVEMENTS),
        color_moods=list(COLOR_MOODS),
        default_style_strength=DEFAULT_STYLE_STRENGTH,
        history_capacity=HISTORY_CAPACITY,
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("artstudio.main:app", host="0.0.0.0", port=8000, reload=True)
