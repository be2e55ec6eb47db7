"""
Development variable server for loadconfig.

This module provides a small FastAPI server that exposes an in-memory
variable store over the JSON API ``VarServerHttpClient`` speaks, so the
loader can be exercised end to end without a real variable server:

- ``GET /vars?name=<name>``
- ``PUT /vars``
- ``GET /vars/all``

Initial variables are read from the JSON file named by
``LOADCONFIG_VARSERVER_VARS``; ``LOADCONFIG_VARSERVER_STRICT=1`` rejects
assignments to variables that file does not declare.
"""

from __future__ import annotations

import os
from typing import Optional

from fastapi import FastAPI, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..core.errors import StoreError, VariableNotFoundError
from ..core.logging import get_logger
from ..integrations.varserver.memory_store import InMemoryVarStore

logger = get_logger("loadconfig.web.varserver")


class SetVariableRequest(BaseModel):
    name: str
    value: str


class VariableResponse(BaseModel):
    name: str
    value: str


def create_app(store: Optional[InMemoryVarStore] = None) -> FastAPI:
    """Build the FastAPI application around ``store``."""
    store = store if store is not None else InMemoryVarStore()

    app = FastAPI(
        title="loadconfig variable server",
        description="In-memory variable store for developing configuration files",
        version="0.1.0",
    )
    app.state.store = store

    @app.get("/vars/all")
    async def list_variables():
        """Return every variable."""
        return JSONResponse(content={"variables": store.snapshot()})

    @app.get("/vars", response_model=VariableResponse)
    async def get_variable(name: str):
        """Return a single variable."""
        value = store.get_by_name(name)
        if value is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Variable not found: {name}",
            )
        return VariableResponse(name=name, value=value)

    @app.put("/vars", response_model=VariableResponse)
    async def set_variable(request: SetVariableRequest):
        """Set a variable."""
        try:
            store.set_by_name(request.name, request.value)
        except VariableNotFoundError:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Variable not found: {request.name}",
            )
        except StoreError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        logger.info("set %s=%r", request.name, request.value)
        return VariableResponse(name=request.name, value=request.value)

    return app


def _store_from_env() -> InMemoryVarStore:
    strict = os.getenv("LOADCONFIG_VARSERVER_STRICT", "0").lower() in ("1", "true", "yes")
    vars_file = os.getenv("LOADCONFIG_VARSERVER_VARS")
    if vars_file:
        return InMemoryVarStore.from_json_file(vars_file, strict=strict)
    return InMemoryVarStore(strict=strict)


if __name__ == "__main__":
    import uvicorn

    from ..core.logging import configure_logging

    configure_logging()
    print("Starting loadconfig variable server on http://127.0.0.1:8085")
    uvicorn.run(create_app(_store_from_env()), host="127.0.0.1", port=8085)
