from typing import List

from fastapi import Depends, FastAPI, Form, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from config import settings, logger, check_api_keys_on_startup, MESSAGES
from exceptions import (
    AnalysisException,
    AnalysisInProgressException,
    PersistenceException,
    ValidationException,
    VeritasException,
)
from middleware import RequestContextMiddleware, get_request_id
from models import AnalyzeRequest, ScanHistoryEntry
from services import AppShell, HistoryStore, LocalStorage
from views import render_state

app = FastAPI(title="Veritas AI", description="News credibility analysis with Gemini and search grounding")

app.add_middleware(RequestContextMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def build_shell() -> AppShell:
    shell = AppShell(HistoryStore(LocalStorage(settings.HISTORY_DIR)))
    shell.load_history()
    logger.info("Loaded %d history entries from %s", len(shell.history), settings.HISTORY_DIR)
    return shell


@app.on_event("startup")
async def startup_event():
    check_api_keys_on_startup()
    app.state.shell = build_shell()


# Single-user local deployment: one shell (state, history, in-flight guard) serves every client.
def get_shell(request: Request) -> AppShell:
    return request.app.state.shell


def _status_for(exc: VeritasException) -> int:
    if isinstance(exc, ValidationException):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, AnalysisInProgressException):
        return status.HTTP_409_CONFLICT
    return status.HTTP_502_BAD_GATEWAY


def _user_message(exc: VeritasException) -> str:
    if isinstance(exc, ValidationException):
        return exc.message
    if isinstance(exc, AnalysisInProgressException):
        return MESSAGES.ANALYSIS_IN_PROGRESS
    return MESSAGES.ANALYSIS_FAILED


@app.get("/health")
async def health_check():
    return {"status": "ok", "message": "Veritas API is running."}


@app.get("/", response_class=HTMLResponse)
async def index(shell: AppShell = Depends(get_shell)):
    return HTMLResponse(render_state(shell.state))


@app.post("/analyze", response_class=HTMLResponse)
async def analyze_form(text: str = Form(""), shell: AppShell = Depends(get_shell)):
    """Form submit from the page; always re-renders the page."""
    shell.edit(text)
    try:
        await shell.submit(text)
    except (ValidationException, AnalysisException, AnalysisInProgressException) as e:
        return HTMLResponse(render_state(shell.state), status_code=_status_for(e))
    return HTMLResponse(render_state(shell.state))


@app.post("/history/clear")
async def clear_history_form(shell: AppShell = Depends(get_shell)):
    try:
        shell.clear_history()
    except PersistenceException as e:
        logger.error("Failed to clear history [%s]: %s", get_request_id(), e.message)
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)


@app.post("/api/analyze")
async def analyze_api(req: AnalyzeRequest, shell: AppShell = Depends(get_shell)):
    shell.edit(req.text)
    try:
        result = await shell.submit(req.text)
    except (ValidationException, AnalysisException, AnalysisInProgressException) as e:
        logger.warning("Analysis request rejected [%s]: %s", get_request_id(), e.to_dict())
        raise HTTPException(status_code=_status_for(e), detail=_user_message(e))
    return result.model_dump(by_alias=True)


@app.get("/api/history", response_model=List[ScanHistoryEntry])
async def get_history(shell: AppShell = Depends(get_shell)):
    return shell.history


@app.delete("/api/history", status_code=status.HTTP_204_NO_CONTENT)
async def delete_history(shell: AppShell = Depends(get_shell)):
    try:
        shell.clear_history()
    except PersistenceException as e:
        logger.error("Failed to clear history [%s]: %s", get_request_id(), e.message)
        raise HTTPException(status_code=500, detail="Could not clear history.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000)
