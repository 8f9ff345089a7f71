"""
Entrypoint module exposing the FastAPI application.

Deployment runs ``uvicorn main:app`` from the backend directory; the
application itself lives in ``newsdesk.main``.
"""

import os

import uvicorn

from newsdesk.core.config import settings
from newsdesk.main import app  # noqa: F401  (re-export for uvicorn main:app)


if __name__ == "__main__":
    port_str = os.environ.get("PORT") or "8000"

    try:
        port = int(port_str)
    except ValueError:
        print(f"ERROR: Invalid PORT value '{port_str}'. Using default port 8000.")
        port = 8000

    print(f"Starting server on port {port}")
    print(f"Environment: {settings.ENVIRONMENT}")

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=port,
        reload=settings.ENVIRONMENT == "development",
        log_level="info"
    )
