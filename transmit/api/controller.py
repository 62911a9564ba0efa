"""
Base controller for JSON API responses.

Controllers are created once per request. They read the include directive
from the request, hand domain objects to the transformation manager and wrap
the result in a JSON response carrying the right status code.

Example:
    ```python
    class BookController(Controller):
        def index(self, session):
            return self.respond_with_paginated_collection(
                session.query(Book), BookTransformer()
            )

    @app.get("/books")
    def list_books(controller: BookController = Depends(BookController.dependency())):
        return controller.index(SessionLocal())
    ```
"""

import logging
from http import HTTPStatus
from typing import Any, Callable, Dict, Mapping, Optional

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from transmit.api.pagination import Paginator, paginate_query
from transmit.config import BaseAppSettings, get_settings
from transmit.errors import (
    ForbiddenError,
    InternalError,
    NotFoundError,
    TransmitError,
    UnauthorizedError,
    UnprocessableEntityError,
    WrongArgumentsError,
    create_error_payload,
)
from transmit.transformation import Manager
from transmit.transformation.resources import ResourceKey


class Controller:
    """
    Base class for controllers emitting JSON envelopes.

    Attributes:
        request: The current request
        manager: Transformation manager holding the requested includes
        settings: Application settings
        status_code: Status used by responders without a fixed status (default 200)
    """

    def __init__(
        self,
        request: Request,
        manager: Optional[Manager] = None,
        settings: Optional[BaseAppSettings] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.request = request
        self.settings = settings or get_settings()
        self.manager = manager or Manager(
            recursion_limit=self.settings.INCLUDE_RECURSION_LIMIT
        )
        self.logger = logger or logging.getLogger(
            f"{__name__}.{self.__class__.__name__}"
        )
        self.status_code: int = int(HTTPStatus.OK)

        self.parse_includes()

    @classmethod
    def dependency(
        cls,
        settings: Optional[BaseAppSettings] = None,
        manager_factory: Optional[Callable[[], Manager]] = None,
    ) -> Callable[[Request], "Controller"]:
        """
        Build a FastAPI dependency creating one controller per request.

        Args:
            settings: Settings shared by every controller created
            manager_factory: Optional factory for a custom manager

        Returns:
            Callable suitable for ``Depends``
        """

        def _controller(request: Request) -> "Controller":
            manager = manager_factory() if manager_factory else None
            return cls(request, manager=manager, settings=settings)

        return _controller

    def parse_includes(self) -> Optional[Manager]:
        """
        Forward the include directive to the manager.

        The header wins over the query parameter when both are given; the two
        are never merged.

        Returns:
            The manager when includes were found, otherwise None
        """
        key = self.settings.INCLUDE_KEY

        includes = self.request.headers.get(key)
        if not includes:
            includes = self.request.query_params.get(key)
        if not includes:
            return None

        return self.manager.parse_includes(includes)

    def get_status_code(self) -> int:
        return self.status_code

    def set_status_code(self, status_code: int) -> "Controller":
        """
        Set the status used by the next responders without a fixed status.

        Returns:
            The controller itself, for chaining
        """
        self.status_code = int(status_code)
        return self

    def respond_with_item(
        self, item: Any, transformer: Any = None, resource_key: ResourceKey = None
    ) -> JSONResponse:
        """
        Respond with a single transformed item.

        Args:
            item: Object to transform
            transformer: Callable, pydantic model class or TransformerAbstract
            resource_key: False emits the item without the ``data`` wrapper

        Returns:
            JSON response with the current status code
        """
        resource = self.manager.item(item, transformer, resource_key)
        return self.respond_with_array(self.manager.create_data(resource).to_dict())

    def respond_with_item_created(
        self, item: Any, transformer: Any = None, resource_key: ResourceKey = None
    ) -> JSONResponse:
        """
        Respond with a newly created item and status 201.
        """
        resource = self.manager.item(item, transformer, resource_key)
        return self.respond_with_array(
            self.manager.create_data(resource).to_dict(),
            status_code=HTTPStatus.CREATED,
        )

    def respond_with_collection(
        self, collection: Any, transformer: Any, resource_key: ResourceKey = None
    ) -> JSONResponse:
        """
        Respond with a transformed collection, keeping the input order.
        """
        resource = self.manager.collection(collection, transformer, resource_key)
        return self.respond_with_array(self.manager.create_data(resource).to_dict())

    def respond_with_paginated_collection(
        self,
        builder: Any,
        transformer: Any,
        per_page: Optional[int] = None,
        resource_key: ResourceKey = None,
    ) -> JSONResponse:
        """
        Respond with one page of a query and its pagination block.

        The current page comes from the page query parameter. All other
        query parameters are carried over to the page links.

        Args:
            builder: SQLAlchemy ORM query, or any object whose
                ``paginate(per_page=..., page=...)`` returns a ``Paginator``
            transformer: Transformer applied to every item of the page
            per_page: Page size, defaults to ``DEFAULT_PER_PAGE``
            resource_key: Resource key of the collection

        Returns:
            JSON response with ``data`` and ``pagination``
        """
        if per_page is None:
            per_page = self.settings.DEFAULT_PER_PAGE
        if per_page < 1:
            raise WrongArgumentsError("The page size must be a positive integer")

        paginator = self._paginate(builder, per_page)
        paginator.appends(self.get_query_parameters())

        resource = self.manager.collection(
            paginator.get_collection(), transformer, resource_key
        ).paginate_with(paginator)

        return self.respond_with_array(self.manager.create_data(resource).to_dict())

    def get_query_parameters(self) -> Dict[str, Any]:
        """
        Current query parameters, without the page parameter.

        A repeated key (``?tag=a&tag=b``) maps to the list of its values.
        """
        params: Dict[str, Any] = {}
        for key, value in self.request.query_params.multi_items():
            if key == self.settings.PAGE_KEY:
                continue
            if key not in params:
                params[key] = value
            elif isinstance(params[key], list):
                params[key].append(value)
            else:
                params[key] = [params[key], value]
        return params

    def get_current_page(self) -> int:
        raw = self.request.query_params.get(self.settings.PAGE_KEY)
        try:
            page = int(raw)
        except (TypeError, ValueError):
            return 1
        return page if page > 0 else 1

    def respond_with_array(
        self,
        data: Any,
        headers: Optional[Mapping[str, str]] = None,
        status_code: Optional[int] = None,
    ) -> JSONResponse:
        """
        Respond with data as-is.

        Args:
            data: JSON-compatible payload
            headers: Extra response headers
            status_code: Status to use instead of the current status code

        Returns:
            JSON response
        """
        return JSONResponse(
            content=jsonable_encoder(data),
            status_code=int(status_code or self.status_code),
            headers=dict(headers) if headers else None,
        )

    def respond_with_no_content(self) -> Response:
        """
        Respond with an empty body and status 204.
        """
        return Response(status_code=int(HTTPStatus.NO_CONTENT))

    def respond_with_error(self, error: TransmitError) -> JSONResponse:
        """
        Respond with the error envelope of an exception.
        """
        self.logger.info(f"Responding with error {error.http_code}: {error.message}")
        return self.respond_with_array(
            create_error_payload(error.http_code, error.message),
            status_code=error.http_code,
        )

    def error_forbidden(self, message: str = "Forbidden") -> JSONResponse:
        return self.respond_with_error(ForbiddenError(message))

    def error_internal_error(self, message: str = "Internal Error") -> JSONResponse:
        return self.respond_with_error(InternalError(message))

    def error_not_found(self, message: str = "Resource Not Found") -> JSONResponse:
        return self.respond_with_error(NotFoundError(message))

    def error_unauthorized(self, message: str = "Unauthorized") -> JSONResponse:
        return self.respond_with_error(UnauthorizedError(message))

    def error_unprocessable_entity(
        self, message: str = "Unprocessable Entity"
    ) -> JSONResponse:
        return self.respond_with_error(UnprocessableEntityError(message))

    def error_wrong_args(self, message: str = "Wrong Arguments") -> JSONResponse:
        return self.respond_with_error(WrongArgumentsError(message))

    def error_custom_type(
        self, message: str, status_code: int = HTTPStatus.BAD_REQUEST
    ) -> JSONResponse:
        return self.respond_with_error(TransmitError(message, status_code))

    def error_array(self, errors: Mapping[str, Any]) -> JSONResponse:
        """
        Respond with field-keyed errors and status 422.

        Args:
            errors: Mapping of field name to message(s), emitted unchanged
        """
        return self.respond_with_array(
            {"errors": dict(errors)}, status_code=HTTPStatus.UNPROCESSABLE_ENTITY
        )

    def _paginate(self, builder: Any, per_page: int) -> Paginator:
        page = self.get_current_page()
        path = str(self.request.url.replace(query=""))

        if hasattr(builder, "paginate"):
            paginator = builder.paginate(per_page=per_page, page=page)
            if not isinstance(paginator, Paginator):
                raise TypeError(
                    f"{type(builder).__name__}.paginate() must return a Paginator, "
                    f"got {type(paginator).__name__}"
                )
        else:
            paginator = paginate_query(
                builder, per_page, page, path=path, page_name=self.settings.PAGE_KEY
            )

        if not paginator.path:
            paginator.path = path
        self.logger.debug(
            f"Fetched page {paginator.current_page} of {paginator.last_page} "
            f"({paginator.count} of {paginator.total} items)"
        )
        return paginator
