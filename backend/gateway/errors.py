# backend/gateway/errors.py


class GatewayError(Exception):
    """Base for failures the gateway reports itself; carries the HTTP status."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RequestValidationFailed(GatewayError):
    status_code = 400


class UnknownResource(GatewayError):
    status_code = 400

    def __init__(self, name: str):
        super().__init__(f"Unknown resource: {name}")
        self.name = name


class UnknownAction(GatewayError):
    status_code = 400

    def __init__(self, name: str):
        super().__init__(f"Unknown action: {name}")
        self.name = name


class AuthenticationRequired(GatewayError):
    status_code = 401


class RecordNotFound(GatewayError):
    # surfaces like a store rejection (500), not a 404
    status_code = 500


def describe_validation_error(exc) -> str:
    """One-line summary of a pydantic ValidationError: `field: reason; ...`."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "body"
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)
