# backend/gateway/gateway_router.py
import json
import logging
from typing import Union

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from config.settings import get_settings
from gateway.cors import cors_json, preflight
from gateway.dependencies import get_resource_gateway
from gateway.dispatcher import RequestContext, ResourceGateway
from gateway.errors import GatewayError, RequestValidationFailed, describe_validation_error
from gateway.resources import Resource, capabilities
from routers.auth_router import router as auth_router
from schemas.envelope import GatewayRequest, GatewayResponse
from services.session_service import bearer_token

logger = logging.getLogger(__name__)

# everything but GET/POST/OPTIONS is answered here with the 405 envelope
SERVED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]

gateway_router = APIRouter(prefix="/gateway", tags=["gateway"])

# admin sessions: /gateway/auth/...
gateway_router.include_router(auth_router)


def _json(payload: Union[GatewayResponse, dict], status_code: int = 200) -> JSONResponse:
    content = payload.to_payload() if isinstance(payload, GatewayResponse) else payload
    return cors_json(content, status_code)


def _error(message: str, status_code: int = 400) -> JSONResponse:
    return _json(GatewayResponse.fail(message), status_code)


def capability_document() -> dict:
    settings = get_settings()
    return {
        "success": True,
        "message": "ThriftySouq Site Management API",
        "version": settings.version,
        "resources": [r.value for r in Resource],
        "actions": capabilities(),
    }


async def _read_envelope(request: Request) -> GatewayRequest:
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise RequestValidationFailed("Invalid JSON body") from None
    if not isinstance(body, dict):
        raise RequestValidationFailed("Invalid JSON body")
    try:
        return GatewayRequest.model_validate(body)
    except ValidationError as e:
        raise RequestValidationFailed(f"Invalid request envelope: {describe_validation_error(e)}") from None


@gateway_router.api_route("/site-management", methods=SERVED_METHODS)
async def site_management(request: Request, gateway: ResourceGateway = Depends(get_resource_gateway)):
    if request.method == "OPTIONS":
        return preflight()

    envelope = None
    try:
        if request.method == "GET":
            return _json(capability_document())
        if request.method != "POST":
            return _error("Method not allowed", 405)

        envelope = await _read_envelope(request)
        context = RequestContext(
            token=bearer_token(request.headers.get("authorization")),
            client_info=request.headers.get("x-client-info"),
        )
        result = await gateway.dispatch(envelope, context)
        return _json(result)

    except GatewayError as e:
        where = f"{envelope.resource}.{envelope.action}" if envelope else "request"
        if e.status_code >= 500:
            logger.error(f"Gateway error in {where}: {e.message}")
        else:
            logger.warning(f"Rejected {where}: {e.message}")
        return _error(e.message, e.status_code)
    except SQLAlchemyError as e:
        where = f"{envelope.resource}.{envelope.action}" if envelope else "request"
        logger.exception(f"Store error in {where}")
        message = str(e.orig) if getattr(e, "orig", None) is not None else str(e)
        return _error(message or "Internal server error", 500)
    except Exception as e:
        logger.exception("Unhandled gateway error")
        return _error(str(e) or "Internal server error", 500)
