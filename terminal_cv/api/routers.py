"""
FastAPI router definitions for the API endpoints.
"""

import html

from fastapi import APIRouter, HTTPException, Response
from fastapi.responses import HTMLResponse

from terminal_cv.api.dependencies import (
    get_handle_key_uc,
    get_manage_sessions_uc,
    get_submit_command_uc,
)
from terminal_cv.api.schemas import (
    CommandRequest,
    CommandResponse,
    ErrorResponse,
    HealthResponse,
    HistoryEntryInfo,
    KeyRequest,
    SessionState,
    SuggestionRequest,
)
from terminal_cv.config.settings import settings
from terminal_cv.entities.session import Session
from terminal_cv.exceptions import BaseAppError, SessionNotFoundError
from terminal_cv.use_cases.terminal.handle_key import Key

router = APIRouter()


def _load_session(session_id: str) -> Session:
    try:
        return get_manage_sessions_uc().get(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except BaseAppError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")


@router.post(
    "/sessions",
    response_model=SessionState,
    status_code=201,
    responses={500: {"model": ErrorResponse}},
)
def create_session():
    """
    Start a new terminal session (one per page view).

    Returns:
        SessionState: The empty session at the root directory
    """
    try:
        session = get_manage_sessions_uc().create()
    except BaseAppError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return SessionState.from_entity(session)


@router.get(
    "/sessions/{session_id}",
    response_model=SessionState,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_session(session_id: str):
    return SessionState.from_entity(_load_session(session_id))


@router.delete(
    "/sessions/{session_id}",
    status_code=204,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def delete_session(session_id: str):
    """Discard a session; the page calls this when it is unloaded."""
    try:
        get_manage_sessions_uc().delete(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except BaseAppError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return Response(status_code=204)


@router.post(
    "/sessions/{session_id}/commands",
    response_model=CommandResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def submit_command(session_id: str, body: CommandRequest):
    """
    Execute a command line in a session.

    Args:
        session_id: Target session
        body: Request body containing the command line

    Returns:
        CommandResponse: The executed entry and the resulting session state

    Raises:
        HTTPException: 400 for a blank line, 404 for an unknown session,
            500 if execution fails
    """
    if not body.input.strip():
        raise HTTPException(status_code=400, detail="Input must not be blank")
    session = _load_session(session_id)

    with session.lock:
        try:
            entry = get_submit_command_uc().execute(session, body.input)
        except BaseAppError as e:
            raise HTTPException(status_code=500, detail=str(e))
        return CommandResponse(
            entry=HistoryEntryInfo.from_entity(entry),
            state=SessionState.from_entity(session),
        )


@router.post(
    "/sessions/{session_id}/keys",
    response_model=SessionState,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def press_key(session_id: str, body: KeyRequest):
    """
    Apply a key press (Enter, ArrowUp, ArrowDown, Tab) to the input line.

    Key presses on one session are applied one at a time.

    Args:
        session_id: Target session
        body: Pressed key and the current input field content

    Returns:
        SessionState: The session state after the key press
    """
    session = _load_session(session_id)

    with session.lock:
        try:
            get_handle_key_uc().execute(session, Key(body.key), body.input)
        except BaseAppError as e:
            raise HTTPException(status_code=500, detail=str(e))
        return SessionState.from_entity(session)


@router.post(
    "/sessions/{session_id}/suggestions",
    response_model=SessionState,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def choose_suggestion(session_id: str, body: SuggestionRequest):
    session = _load_session(session_id)

    with session.lock:
        try:
            get_handle_key_uc().choose_suggestion(session, body.suggestion)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return SessionState.from_entity(session)


@router.get("/", response_class=HTMLResponse)
def terminal_ui():
    """Browser terminal widget backed by the session API."""
    page = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <title>Terminal CV</title>
  <style>
    body { background: #111827; color: #f3f4f6; margin: 0; padding: 16px; }
    #term { max-width: 56rem; margin: 0 auto; font: 14px ui-monospace, monospace;
            background: #111827; border: 1px solid #374151; border-radius: 8px;
            height: 80vh; overflow-y: auto; padding: 16px; }
    .welcome { color: #4ade80; margin-bottom: 16px; white-space: pre-wrap; }
    .line { color: #22c55e; }
    .path { color: #c084fc; }
    .out { white-space: pre-wrap; color: #d1d5db; margin-bottom: 12px; }
    .error { color: #f87171; }
    .files { display: grid; grid-template-columns: repeat(4, 1fr); gap: 8px; }
    .dir { color: #60a5fa; }
    #input { flex: 1; margin-left: 8px; background: transparent; border: 0;
             outline: none; color: #f3f4f6; font: inherit; }
    .prompt { display: flex; align-items: center; }
    #suggestions div { cursor: pointer; color: #d1d5db; margin-left: 24px; }
  </style>
</head>
<body>
  <div id="term">
    <div class="welcome">Welcome to __OWNER__'s Terminal CV!
Type 'help' for available commands.</div>
    <div id="history"></div>
    <div class="prompt"><span class="line">&gt;&nbsp;</span><span class="path" id="prompt">~</span><span class="line">&nbsp;$</span>
      <input id="input" autofocus spellcheck="false" autocomplete="off" />
    </div>
    <div id="suggestions"></div>
  </div>
  <script>
    const input = document.getElementById('input');
    let sessionId = null;

    function el(tag, cls, text) {
      const node = document.createElement(tag);
      if (cls) node.className = cls;
      if (text !== undefined) node.textContent = text;
      return node;
    }

    function render(state) {
      const history = document.getElementById('history');
      history.innerHTML = '';
      for (const entry of state.entries) {
        const line = el('div', 'line');
        line.append('> ', el('span', 'path', entry.prompt), ' $ ', el('span', '', entry.input));
        history.append(line);
        const result = entry.result;
        if (result.type === 'files') {
          const grid = el('div', 'files out');
          for (const item of result.entries) {
            grid.append(el('span', item.kind === 'directory' ? 'dir' : '', item.name));
          }
          history.append(grid);
        } else {
          history.append(el('div', result.type === 'error' ? 'out error' : 'out', result.output));
        }
      }
      document.getElementById('prompt').textContent = state.prompt;
      input.value = state.input;
      const suggestions = document.getElementById('suggestions');
      suggestions.innerHTML = '';
      for (const name of state.suggestions) {
        const item = el('div', '', name);
        item.onclick = () => post('/suggestions', { suggestion: name });
        suggestions.append(item);
      }
      const term = document.getElementById('term');
      term.scrollTop = term.scrollHeight;
      input.focus();
    }

    async function send(path, body) {
      const res = await fetch('/sessions/' + sessionId + path, {
        method: 'POST',
        headers: { 'Content-Type': 'application/json' },
        body: JSON.stringify(body),
      });
      if (res.ok) render(await res.json());
    }

    // requests go out one at a time, in the order the keys were pressed
    let pending = fetch('/sessions', { method: 'POST' })
      .then((res) => res.json())
      .then((state) => { sessionId = state.id; render(state); });

    function post(path, body) {
      pending = pending.then(() => send(path, body)).catch((err) => console.error(err));
      return pending;
    }

    input.addEventListener('keydown', (e) => {
      if (['Enter', 'ArrowUp', 'ArrowDown', 'Tab'].includes(e.key)) {
        e.preventDefault();
        post('/keys', { key: e.key, input: input.value });
      }
    });
    document.getElementById('term').addEventListener('click', () => input.focus());

    window.addEventListener('pagehide', () => {
      if (sessionId) {
        fetch('/sessions/' + sessionId, { method: 'DELETE', keepalive: true });
        sessionId = null;
      }
    });
    // a page restored from the back/forward cache has lost its session
    window.addEventListener('pageshow', (e) => {
      if (e.persisted) location.reload();
    });
  </script>
</body>
</html>
    """.replace("__OWNER__", html.escape(settings.owner))
    return HTMLResponse(content=page, status_code=200)
