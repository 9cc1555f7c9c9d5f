"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  Every route
runs its rule set first (``validate_request``); domain exceptions raised by
the service are translated into HTTP status codes here.  Database errors
propagate to ``modules.core.exceptions.api_exception_handler``.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.decorators import validate_request
from modules.core.validation import BODY, renderable
from modules.products.dtos import CreateProductDTO, ReplaceProductDTO
from modules.products.exceptions import NOT_FOUND_MESSAGE, ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService
from modules.products.validators import CREATE_RULES, ID_RULES, REPLACE_RULES

DELETED_MESSAGE = "Producto Eliminado"

_ID_PARAMETER = OpenApiParameter(
    "id", int, OpenApiParameter.PATH, description="The ID of the product"
)


def _not_found() -> Response:
    return Response({"error": NOT_FOUND_MESSAGE}, status=status.HTTP_404_NOT_FOUND)


def _dto_errors(exc: PydanticValidationError) -> Response:
    """Render Pydantic errors with the same shape as rule failures."""
    errors = []
    for err in exc.errors():
        error = {"type": "field"}
        if err.get("input") is not None and err["type"] != "missing":
            error["value"] = renderable(err["input"])
        error["msg"] = err["msg"]
        error["path"] = ".".join(str(part) for part in err["loc"])
        error["location"] = BODY
        errors.append(error)
    return Response({"errors": errors}, status=status.HTTP_400_BAD_REQUEST)


@extend_schema_view(
    list=extend_schema(summary="Get a list of products"),
    retrieve=extend_schema(summary="Get a product by ID", parameters=[_ID_PARAMETER]),
    create=extend_schema(summary="Create a new product", request=CreateProductDTO),
    update=extend_schema(
        summary="Updates a product with user input",
        parameters=[_ID_PARAMETER],
        request=ReplaceProductDTO,
    ),
    partial_update=extend_schema(
        summary="Update Product availability", parameters=[_ID_PARAMETER], request=None
    ),
    destroy=extend_schema(
        summary="Delete a product by a given ID", parameters=[_ID_PARAMETER]
    ),
)
@extend_schema(tags=["Products"], responses=ProductSerializer)
class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with the repository named by
    ``repository_class`` (DIP).  All ORM access goes through the
    service/repository layer.
    """

    lookup_url_kwarg = "id"
    # Anything up to the next slash reaches the view, so a malformed id is
    # answered by ID_RULES with 400 instead of a router 404.
    lookup_value_regex = "[^/]+"
    repository_class = ProductDjangoRepository

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=self.repository_class())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.list_products()
        return Response({"data": ProductSerializer(products, many=True).data})

    @validate_request(ID_RULES)
    def retrieve(self, request: Request, id: str) -> Response:
        """GET /api/products/{id}"""
        try:
            product = self._service.get_product(int(id))
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    # ------------------------------------------------------------------
    # Create / Replace / Toggle / Destroy
    # ------------------------------------------------------------------

    @validate_request(CREATE_RULES)
    def create(self, request: Request) -> Response:
        """POST /api/products"""
        try:
            dto = CreateProductDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return _dto_errors(exc)

        product = self._service.create_product(dto)
        return Response(
            {"data": ProductSerializer(product).data},
            status=status.HTTP_201_CREATED,
        )

    @validate_request(REPLACE_RULES)
    def update(self, request: Request, id: str) -> Response:
        """PUT /api/products/{id}"""
        try:
            dto = ReplaceProductDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return _dto_errors(exc)

        try:
            product = self._service.replace_product(int(id), dto)
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    @validate_request(ID_RULES)
    def partial_update(self, request: Request, id: str) -> Response:
        """PATCH /api/products/{id}

        The body is ignored: the route only flips ``availability``.
        """
        try:
            product = self._service.toggle_availability(int(id))
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    @validate_request(ID_RULES)
    def destroy(self, request: Request, id: str) -> Response:
        """DELETE /api/products/{id}"""
        try:
            self._service.delete_product(int(id))
        except ProductNotFound:
            return _not_found()
        return Response({"data": DELETED_MESSAGE})
