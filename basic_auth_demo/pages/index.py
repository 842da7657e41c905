"""
Render the demo page.

The page is a Jinja2 template shipped with the package. It only calls the
protected endpoint; it has no auth logic of its own.
"""

from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from ..gate.credential import Credential

# Autoescaping is on for Jinja2Templates environments
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))


def render_index(request: Request, credential: Credential, protected_path: str):
    """
    Fill the page template with the configured credential and endpoint.

    Args:
        request (Request): Incoming request, required by TemplateResponse.
        credential (Credential): Identity and secret shown to the visitor.
        protected_path (str): Path the demo buttons call.

    Returns:
        TemplateResponse: The HTML page.
    """
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "user_name": credential.identity,
            "password": credential.secret,
            "protected_path": protected_path,
        },
    )
