"""
OAuth2 token endpoint.

Endpoints:
- POST /oauth2/token - Run a grant and issue an access token

The request body is form encoded (RFC 6749 section 4). Every field is handed
to the grant handler as a request parameter; ``grant_type``, ``client_id`` and
``scope`` are additionally parsed into the token request.
"""
import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from scitrera_app_framework import Plugin, Variables

from . import EXT_MULTI_API_ROUTERS
from ..exceptions import InvalidRequestError, OAuth2Error, OAuth2ServerError
from ..lifecycle.fastapi import get_logger, get_variables_dep
from ..models.request import AccessTokenRequest, RequestParameter, TokenRequestContext
from ..models.token import AccessTokenResponse
from ..services.grant import GrantHandlerRegistry, get_grant_handler_registry

router = APIRouter(prefix="/oauth2", tags=["oauth2"])

NO_STORE_HEADERS = {"Cache-Control": "no-store", "Pragma": "no-cache"}


def get_grant_registry(v: Variables = Depends(get_variables_dep)) -> GrantHandlerRegistry:
    """FastAPI dependency wrapper for the grant handler registry."""
    return get_grant_handler_registry(v)


def _build_token_request(form) -> AccessTokenRequest:
    """Parse the form body into a token request.

    Raises:
        InvalidRequestError: If a field has the wrong shape (e.g. a file upload)
    """
    parameters = [
        RequestParameter(key=key, value=[str(value) for value in form.getlist(key)])
        for key in dict.fromkeys(form.keys())
    ]
    try:
        return AccessTokenRequest(
            grant_type=form.get("grant_type") or "",
            client_id=form.get("client_id"),
            scope=str(form.get("scope") or "").split(),
            request_parameters=parameters,
        )
    except ValidationError as e:
        fields = ", ".join(str(error["loc"][0]) for error in e.errors() if error.get("loc"))
        raise InvalidRequestError(f"Malformed token request parameters: {fields}") from e


def _error_response(error: OAuth2Error) -> JSONResponse:
    return JSONResponse(content=error.to_dict(), status_code=error.status_code, headers=NO_STORE_HEADERS)


@router.post(
    "/token",
    response_model=AccessTokenResponse,
    response_model_exclude_none=True,
    responses={
        400: {"description": "Invalid token request or rejected grant"},
        500: {"description": "Internal server error"},
    },
)
async def token(
        http_request: Request,
        registry: GrantHandlerRegistry = Depends(get_grant_registry),
        logger: logging.Logger = Depends(get_logger),
):
    """
    Issue an access token.

    Args:
        http_request: FastAPI request (form body)
        registry: Grant handler registry

    Returns:
        Access token response, or an RFC 6749 error body
    """
    form = await http_request.form()
    grant_type = form.get("grant_type")

    try:
        context = TokenRequestContext(request=_build_token_request(form))
        # grant handlers are synchronous
        response = await run_in_threadpool(registry.handle, context)
    except OAuth2ServerError as e:
        logger.error("Token request failed (grant_type=%s): %s", grant_type, e, exc_info=True)
        return _error_response(e)
    except OAuth2Error as e:
        logger.debug("Token request rejected (grant_type=%s): %s", grant_type, e.message)
        return _error_response(e)
    except Exception as e:
        logger.error("Unexpected token endpoint error (grant_type=%s): %s", grant_type, e, exc_info=True)
        return JSONResponse(
            content={"error": "server_error", "error_description": "Internal server error"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            headers=NO_STORE_HEADERS,
        )

    return JSONResponse(
        content=response.model_dump(exclude_none=True),
        status_code=status.HTTP_200_OK,
        headers=NO_STORE_HEADERS,
    )


class OAuth2APIPlugin(Plugin):
    """Plugin to register OAuth2 API routes."""

    def extension_point_name(self, v: Variables) -> str:
        return EXT_MULTI_API_ROUTERS

    def initialize(self, v: Variables, logger: logging.Logger) -> object | None:
        return router

    def is_enabled(self, v: Variables) -> bool:
        return False  # disable "single" extension for a multi-extension plugin

    def is_multi_extension(self, v: Variables) -> bool:
        return True
