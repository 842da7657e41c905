"""
Main API module for the Basic-Auth demo.

Responsibilities:
    - Expose one protected endpoint guarded by HTTP Basic Authentication
    - Answer unauthenticated requests with a bare `WWW-Authenticate: Basic` challenge
    - Serve the demo page at "/" that calls the protected endpoint with and
      without a pre-computed `Authorization` header
    - Resolve every other path to an empty 404

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - The expected credential is an immutable value injected into a gate
      stored on `app.state`; nothing global is mutated.
    - Error responses (401, 404, 405) have empty bodies; only headers matter.

LLM Prompt Example:
    "Explain how to structure a FastAPI service with an application factory,
    injected dependencies, and a clean separation between API and auth logic."
"""

import logging
from typing import Optional

from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from auth.config import load_credential
from auth.dependencies import get_current_user
from auth.schemas import UserOut
from basic_auth_demo.config import normalize_protected_path, settings
from basic_auth_demo.gate import BasicAuthGate, Credential
from basic_auth_demo.pages import render_index


def create_app(credential: Optional[Credential] = None, protected_path: Optional[str] = None) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        credential (Credential, optional): Expected identity/secret. Defaults to
            `load_credential()` (environment, then "tom"/"1234").
        protected_path (str, optional): Path guarded by the gate. Defaults to
            `settings.PROTECTED_PATH`.

    Returns:
        FastAPI: A configured application with its own gate instance.

    Why an app factory?
        - Enables per-test isolation in pytest (e.g. a different credential).
        - Keeps the credential an explicit input instead of module state.
    """
    app = FastAPI(
        title="Basic Auth Demo",
        description="Pre-computed Authorization headers versus the browser credential prompt",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    log = logging.getLogger("basic_auth_demo")

    # basic console logging (optional)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=settings.LOG_LEVEL)

    credential = credential or load_credential()
    protected_path = normalize_protected_path(protected_path) if protected_path else settings.PROTECTED_PATH
    app.state.gate = BasicAuthGate(credential)

    log.info("Protecting %s for user %r", protected_path, credential.identity)

    # ----------------------------------------------------------------
    # Error rendering
    # ----------------------------------------------------------------
    @app.exception_handler(StarletteHTTPException)
    async def empty_http_error(request: Request, exc: StarletteHTTPException) -> Response:
        """
        Render HTTP errors as status + headers with an empty body.

        Covers the 401 challenge raised by the auth dependency, the 404 for
        unknown paths and the 405 for wrong methods on a known path.
        """
        return Response(status_code=exc.status_code, headers=getattr(exc, "headers", None))

    # ----------------------------------------------------------------
    # Routes
    # ----------------------------------------------------------------
    @app.get("/", response_class=HTMLResponse)
    def index(request: Request):
        """Demo page with the two fetch buttons."""
        return render_index(request, credential, protected_path)

    @app.get(protected_path, response_model=UserOut)
    def read_data(user_name: str = Depends(get_current_user)) -> UserOut:
        """
        Return the authenticated user name.

        Returns:
            UserOut: `{"userName": "<identity>"}`

        Raises:
            HTTPException: 401 with `WWW-Authenticate: Basic` when the
                `Authorization` header is missing, malformed or wrong.
        """
        return UserOut(userName=user_name)

    return app


# `uvicorn main:app --reload` and `from main import app` continue to work.
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT)
