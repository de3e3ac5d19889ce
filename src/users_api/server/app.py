"""Starlette ASGI application exposing the user store over HTTP."""

from __future__ import annotations

import logging
from typing import Any

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from ..exceptions import BadRequestError, UserStoreError
from ..store import UserStore

logger = logging.getLogger(__name__)

DELETED_MESSAGE = "User deleted successfully"


async def _read_json_object(request: Request) -> dict[str, Any]:
    """Parse the request body, which must be a JSON object."""
    try:
        body = await request.json()
    except ValueError:
        raise BadRequestError("Request body must be a JSON object")
    if not isinstance(body, dict):
        raise BadRequestError("Request body must be a JSON object")
    return body


async def _store_error(request: Request, exc: UserStoreError) -> JSONResponse:
    """Translate a store error into its status code and error body."""
    logger.debug("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc)
    return JSONResponse(exc.to_json(), status_code=exc.status_code)


def create_app(store: UserStore) -> Starlette:
    """Build the Starlette application wired to *store*.

    Args:
        store: The user store every handler reads and writes
    """

    async def list_users(request: Request) -> JSONResponse:
        return JSONResponse([user.to_dict() for user in store.list()])

    async def get_user(request: Request) -> JSONResponse:
        user = store.get(request.path_params["user_id"])
        return JSONResponse(user.to_dict())

    async def create_user(request: Request) -> JSONResponse:
        body = await _read_json_object(request)
        user = store.create(body.get("name"), body.get("email"))
        return JSONResponse(user.to_dict(), status_code=201)

    async def update_user(request: Request) -> JSONResponse:
        body = await _read_json_object(request)
        user = store.update(request.path_params["user_id"], body)
        return JSONResponse(user.to_dict())

    async def delete_user(request: Request) -> JSONResponse:
        store.delete(request.path_params["user_id"])
        return JSONResponse({"message": DELETED_MESSAGE})

    async def health(request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok", "users": len(store)})

    routes = [
        Route("/health", health, methods=["GET"]),
        Route("/users", list_users, methods=["GET"]),
        Route("/users", create_user, methods=["POST"]),
        Route("/users/{user_id}", get_user, methods=["GET"]),
        Route("/users/{user_id}", update_user, methods=["PUT"]),
        Route("/users/{user_id}", delete_user, methods=["DELETE"]),
    ]

    return Starlette(
        routes=routes,
        exception_handlers={UserStoreError: _store_error},
    )
