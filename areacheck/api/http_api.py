"""
HTTP API adapter for the area-check pipeline.

Architectural role:
- Expose the point check as a query-string endpoint.
- Own session identity through an opaque cookie.
- Delegate validation, the region check and history bookkeeping to
  `areacheck.core.engine.process_check`.

Endpoint responsibilities:
- `GET /areaCheck`: run one check and return the caller's full session history.
- `DELETE /areaCheck/session`: invalidate the caller's session history.
- `GET /healthz`: liveness probe.

API request lifecycle (`GET /areaCheck`):
1. Build the raw parameter bag from the query string, dropping blank values so
   `scale=` reaches the core as a key without values.
2. Resolve the session id from the cookie, minting one when absent.
3. Run the pipeline for that session.
4. Return the root-wrapped history payload and (re)set the session cookie.

Error handling strategy:
- `ParamNotFound` / `ParamValueNotProvided` -> HTTP 400.
- `InvalidValue` -> HTTP 422.
- Error body: `{"error": <kind>, "param": <name>, "message": <reason>}`.
- Region predicate failures are not wrapped and follow FastAPI default handling.

Side effects:
- Mutates the process-local session history store on successful checks only.
- Drops session histories idle for longer than `AREACHECK_SESSION_TTL` seconds
  at the start of every check.
- Emits request debug logs only when `AREACHECK_DEBUG == "true"`.

Concurrency:
- Route handlers are synchronous and run on FastAPI's worker threadpool; the
  history store serializes appends per session.
"""

import logging
import uuid

from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import JSONResponse

from areacheck.config import DEBUG, SESSION_COOKIE_NAME, SESSION_TTL_SECONDS
from areacheck.core.engine import process_check
from areacheck.core.errors import AreaCheckError
from areacheck.geometry.region import DEFAULT_REGION
from areacheck.memory.session_history import SessionHistoryStore

logger = logging.getLogger(__name__)

app = FastAPI(title="AreaCheck")

session_store = SessionHistoryStore()


# ============================================================
# Dependencies
# ============================================================

def get_store():
    """Return the process-wide session history store."""
    return session_store


def get_region():
    """Return the region predicate used for membership checks."""
    return DEFAULT_REGION


def get_session_ttl():
    """Return the idle lifetime of a session history, in seconds."""
    return SESSION_TTL_SECONDS


def extract_raw_params(request: Request):
    """Map every query key to its non-blank values, preserving order."""
    query = request.query_params
    return {
        key: [value for value in query.getlist(key) if value != ""]
        for key in query.keys()
    }


def resolve_session_id(request: Request):
    return request.cookies.get(SESSION_COOKIE_NAME) or uuid.uuid4().hex


# ============================================================
# Error Mapping
# ============================================================

@app.exception_handler(AreaCheckError)
async def area_check_error_handler(request: Request, exc: AreaCheckError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# ============================================================
# Endpoints
# ============================================================

@app.get("/healthz")
def healthz():
    return {"status": "ok"}


@app.get("/areaCheck")
def area_check(
    request: Request,
    response: Response,
    store: SessionHistoryStore = Depends(get_store),
    region=Depends(get_region),
    session_ttl: float = Depends(get_session_ttl),
):
    """
    Run one point check for the caller's session.

    Response formatting:
    - `userAreaData.areaDataList[]` holds every check of the session, oldest first.
    - `calculatedAt` is ISO-8601 UTC; `calculationTime` is whole seconds.
    """
    store.expire_idle(session_ttl)

    raw_params = extract_raw_params(request)
    session_id = resolve_session_id(request)

    if DEBUG:
        logger.info("areaCheck session=%s params=%s", session_id, raw_params)

    payload = process_check(raw_params, session_id, store, region=region)

    response.set_cookie(SESSION_COOKIE_NAME, session_id, httponly=True)
    return payload.to_wire()


@app.delete("/areaCheck/session", status_code=204)
def invalidate_session(
    request: Request,
    store: SessionHistoryStore = Depends(get_store),
):
    """Drop the caller's history and expire the session cookie."""
    session_id = request.cookies.get(SESSION_COOKIE_NAME)
    if session_id:
        store.invalidate(session_id)

    if DEBUG:
        logger.info("Session invalidated: %s", session_id)

    response = Response(status_code=204)
    response.delete_cookie(SESSION_COOKIE_NAME)
    return response
