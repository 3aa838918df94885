"""Entry point for the SportConnect API.

Starts the FastAPI application with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``8000``).

Usage:
    python run.py
"""
import os

import uvicorn


def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    uvicorn.run("sportconnect_api.app.main:app", host=host, port=port, reload=False, log_level="info")


if __name__ == "__main__":
    main()
