"""Rai Aura storefront FastAPI application.

Processes commands synchronously over HTTP inside the storefront domain
context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV controls which config overlay is applied:
#   - unset/"test" → in-memory store, event handlers run in the request
#   - "production" → PostgreSQL, event handlers run in src/server.py
import storefront.elements  # noqa: F401
from storefront.domain import storefront

storefront.init()

from storefront.web import create_app  # noqa: E402

app = create_app()
