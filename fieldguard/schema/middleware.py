"""Request-pipeline adaptors for FastAPI/Starlette applications.

The adaptors only translate a ``ValidationResult`` into the pipeline's
terms: a JSON failure response with the configured status, or a call to the
next stage. All validation logic stays in ``Validator``.

Two scopes are supported:

- per route, through a FastAPI dependency (``create_dependency``) that raises
  ``RecordRejectedError``; ``install_error_handler`` turns it into the
  failure response;
- app wide, through ``create_dispatch`` / ``ValidationMiddleware``, limited
  to the given paths and HTTP methods.
"""

from typing import TYPE_CHECKING, Any, Awaitable, Callable, FrozenSet, Iterable, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from ..config.logging import LoggerMixin, get_module_logger
from ..config.settings import Settings
from ..core.exceptions import RecordRejectedError

if TYPE_CHECKING:
    from .validator import Validator

Dispatch = Callable[[Request, RequestResponseEndpoint], Awaitable[Response]]
Dependency = Callable[[Request], Awaitable[Any]]

logger = get_module_logger("middleware")


async def read_json_body(request: Request) -> Any:
    """Return the decoded JSON body, or None when there is none."""
    try:
        return await request.json()
    except ValueError:
        # Empty or malformed body; required fields will report themselves
        return None


def failure_response(errors: str, error_status: int) -> JSONResponse:
    """The JSON body sent back for a rejected request."""
    return JSONResponse({"success": False, "errors": errors}, status_code=error_status)


def create_dependency(
    validator: "Validator",
    error_status: int = 422,
    strict: bool = True,
) -> Dependency:
    """Build a FastAPI dependency that validates the request body.

    The dependency returns the decoded body on success and raises
    ``RecordRejectedError`` otherwise. Only routes that declare it are
    checked.

    Example:
        install_error_handler(app)

        @app.post("/players")
        async def create_player(body=Depends(create_dependency(player_schema))):
            ...
    """

    async def validated_body(request: Request) -> Any:
        body = await read_json_body(request)
        result = validator.validate(body, strict)
        if not result.success:
            raise RecordRejectedError(result.errors, error_status)
        return body

    return validated_body


async def record_rejected_handler(request: Request, exc: RecordRejectedError) -> JSONResponse:
    logger.info(
        "Request rejected",
        method=request.method,
        path=request.url.path,
        status=exc.status_code,
    )
    return failure_response(exc.errors, exc.status_code)


def install_error_handler(app: FastAPI) -> None:
    """Register the ``RecordRejectedError`` handler on ``app``."""
    app.add_exception_handler(RecordRejectedError, record_rejected_handler)


def _path_set(paths: Optional[Iterable[str]]) -> Optional[FrozenSet[str]]:
    if paths is None:
        return None
    if isinstance(paths, str):
        paths = [paths]
    return frozenset(path.rstrip("/") or "/" for path in paths)


def create_dispatch(
    validator: "Validator",
    error_status: int = 422,
    strict: bool = True,
    paths: Optional[Iterable[str]] = None,
) -> Dispatch:
    """Build a ``dispatch(request, call_next)`` callable for ``validator``.

    Usable with ``app.middleware("http")`` or ``BaseHTTPMiddleware``. When
    ``paths`` is given, requests to any other path pass through untouched;
    without it every request is validated.
    """
    checked_paths = _path_set(paths)

    async def dispatch(request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path.rstrip("/") or "/"
        if checked_paths is not None and path not in checked_paths:
            return await call_next(request)

        body = await read_json_body(request)
        result = validator.validate(body, strict)

        if not result.success:
            logger.info(
                "Request rejected",
                method=request.method,
                path=request.url.path,
                status=error_status,
            )
            return failure_response(result.errors, error_status)

        return await call_next(request)

    return dispatch


class ValidationMiddleware(BaseHTTPMiddleware, LoggerMixin):
    """Validate request bodies before they reach the application.

    Example:
        app.add_middleware(ValidationMiddleware, validator=user_schema, paths=["/users"])
    """

    def __init__(
        self,
        app: ASGIApp,
        validator: "Validator",
        error_status: Optional[int] = None,
        strict: Optional[bool] = None,
        methods: Optional[Iterable[str]] = None,
        paths: Optional[Iterable[str]] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        super().__init__(app)
        settings = settings or Settings()

        self.validator = validator
        self.error_status = (
            error_status if error_status is not None else settings.VALIDATION_ERROR_STATUS
        )
        self.strict = strict if strict is not None else settings.VALIDATION_STRICT
        self.methods = frozenset(
            method.upper()
            for method in (methods if methods is not None else settings.VALIDATED_METHODS)
        )
        self.paths = _path_set(paths)
        self._validate_request = create_dispatch(
            validator, self.error_status, self.strict, self.paths
        )

        self.logger.debug(
            "Validation middleware installed",
            fields=list(validator.field_names),
            methods=sorted(self.methods),
            paths=sorted(self.paths) if self.paths is not None else None,
            error_status=self.error_status,
            strict=self.strict,
        )

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.method.upper() not in self.methods:
            return await call_next(request)
        return await self._validate_request(request, call_next)
