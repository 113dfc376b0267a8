# backend/gateway/dispatcher.py
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import sessionmaker

from gateway.dashboard import DashboardAggregator
from gateway.errors import AuthenticationRequired, RequestValidationFailed
from gateway.handlers import ResourceHandler, build_handlers
from gateway.resources import Action, Resource, requires_admin
from schemas.envelope import GatewayRequest, GatewayResponse
from services.session_service import AdminSession, AdminSessionService

logger = logging.getLogger(__name__)


@dataclass
class RequestContext:
    """Per-request caller information handed from the router to the gateway."""

    token: Optional[str] = None
    client_info: Optional[str] = None
    admin: Optional[AdminSession] = None


class ResourceGateway:
    """Maps one request envelope onto exactly one resource handler."""

    def __init__(self, session_factory: sessionmaker, sessions: AdminSessionService,
                 require_admin: bool = True):
        self.session_factory = session_factory
        self.sessions = sessions
        self.require_admin = require_admin
        self.handlers = build_handlers()
        self.dashboard = DashboardAggregator(session_factory)

    async def dispatch(self, request: GatewayRequest, context: RequestContext) -> GatewayResponse:
        if not request.action or not request.resource:
            raise RequestValidationFailed("Action and resource are required")

        resource = Resource.parse(request.resource)

        if resource is Resource.DASHBOARD:
            action = self.dashboard.resolve_action(request.action)
            await self._authorize(resource, action, context)
            return GatewayResponse.ok(await self.dashboard.get_summary())

        handler = self.handlers[resource]
        action = handler.resolve_action(request.action)
        handler.check_inputs(action, request)
        await self._authorize(resource, action, context)
        return await run_in_threadpool(self._run, handler, action, request)

    async def _authorize(self, resource: Resource, action: Action, context: RequestContext) -> None:
        if not self.require_admin or not requires_admin(resource, action):
            return
        if context.admin is None and context.token:
            context.admin = await run_in_threadpool(self.sessions.verify, context.token)
        if context.admin is None:
            raise AuthenticationRequired(f"Admin session required for {resource.value}.{action.value}")

    def _run(self, handler: ResourceHandler, action: Action, request: GatewayRequest) -> GatewayResponse:
        with self.session_factory() as db:
            return handler.handle(db, action, request)
