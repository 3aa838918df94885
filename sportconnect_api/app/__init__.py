"""
Application package initializer.

The service is organised into a small number of layers so that the
match membership store can be used without the HTTP surface:

* ``schemas`` – pydantic entity and request models;
* ``core`` – configuration, logging, errors and the storage port;
* ``services`` – the transaction engine, the store and the access façade;
* ``api`` – versioned FastAPI routers.
"""

from .main import create_app  # noqa: F401
