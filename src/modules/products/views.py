"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  Payloads and
query strings are validated into Pydantic DTOs; domain exceptions propagate
to ``modules.core.exception_handler``, which maps them to 400/404/409.
"""

from __future__ import annotations

from django.conf import settings
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.validation import validate_payload
from modules.products.dtos import (
    CreateProductDTO,
    LowStockQueryDTO,
    PriceRangeQueryDTO,
    StockUpdateDTO,
    UpdateProductDTO,
)
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations and filtered listings.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).  All ORM
    access goes through the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    pagination_class = None

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(
            repository=ProductDjangoRepository(),
            low_stock_threshold=settings.LOW_STOCK_THRESHOLD,
        )

    def _many(self, products) -> Response:
        return Response(ProductSerializer(products, many=True).data)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/products"""
        return self._many(self._service.list_products())

    @action(detail=False, methods=["get"], url_path="available")
    def available(self, request: Request) -> Response:
        """GET /api/v1/products/available"""
        return self._many(self._service.list_available_products())

    @action(detail=False, methods=["get"], url_path="low-stock")
    def low_stock(self, request: Request) -> Response:
        """GET /api/v1/products/low-stock?threshold=N"""
        query = validate_payload(LowStockQueryDTO, request.query_params)
        return self._many(self._service.list_low_stock(query.threshold))

    @action(detail=False, methods=["get"], url_path=r"category/(?P<category>[^/]+)")
    def category(self, request: Request, category: str) -> Response:
        """GET /api/v1/products/category/{category}"""
        return self._many(self._service.list_by_category(category))

    @action(detail=False, methods=["get"], url_path="price-range")
    def price_range(self, request: Request) -> Response:
        """GET /api/v1/products/price-range?min=A&max=B"""
        query = validate_payload(PriceRangeQueryDTO, request.query_params)
        return self._many(
            self._service.list_by_price_range(query.min_price, query.max_price)
        )

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}"""
        product = self._service.get_product(pk)
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/products"""
        dto = validate_payload(CreateProductDTO, request.data)
        product = self._service.create_product(dto)
        return Response(
            ProductSerializer(product).data, status=status.HTTP_201_CREATED
        )

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/products/{pk}"""
        dto = validate_payload(UpdateProductDTO, request.data)
        product = self._service.update_product(pk, dto)
        return Response(ProductSerializer(product).data)

    @action(detail=True, methods=["put"], url_path="stock")
    def stock(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/products/{pk}/stock  body: ``{"stock": N}``"""
        dto = validate_payload(StockUpdateDTO, request.data)
        self._service.update_stock(pk, dto.stock)
        return Response(status=status.HTTP_204_NO_CONTENT)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk} (permanent)"""
        self._service.remove_product(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["delete"], url_path="soft")
    def soft_delete(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/soft"""
        self._service.soft_delete_product(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["delete"], url_path="hard")
    def hard_delete(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/hard"""
        self._service.hard_delete_product(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
