"""Recurso de comercio: productos, categorías, carrito, pedidos, pagos y cupones.

Productos y categorías son públicos; carrito, pedidos, pagos y cupones
requieren un token (o la sesión de carrito del servidor).
"""

from __future__ import annotations

from typing import Any

from promptly.adapters.resources.base import BaseResource
from promptly.core.domain.common import ListParams, ListResponse, PayloadLike, to_payload
from promptly.core.domain.shop import (
    AddToCartData,
    Cart,
    Coupon,
    CouponValidation,
    CreateOrderData,
    Order,
    Payment,
    PaymentCancelData,
    PaymentConfirmData,
    PaymentReadyData,
    Product,
    ProductCategory,
    UpdateCartItemData,
)


class ShopResource(BaseResource):
    # Productos (públicos)

    async def list_products(self, params: ListParams | PayloadLike | None = None) -> ListResponse[Product]:
        """Filtros: `category`, `status`, `is_featured`, `min_price`, `max_price`, `search`, `in_stock`."""

        return await self._http.get_list("/public/products", to_payload(params), model=Product)

    async def get_product(self, id_or_slug: int | str) -> Product:
        return self._parse(Product, await self._http.get(f"/public/products/{id_or_slug}"))

    async def featured_products(self, limit: int = 8) -> list[Product]:
        response = await self._http.get_list(
            "/public/products",
            {"per_page": limit, "is_featured": True},
            model=Product,
        )
        return response.data

    async def search_products(
        self,
        query: str,
        params: ListParams | PayloadLike | None = None,
    ) -> ListResponse[Product]:
        merged = dict(to_payload(params) or {})
        merged["search"] = query
        return await self._http.get_list("/public/products", merged, model=Product)

    # Categorías (públicas)

    async def list_categories(self) -> list[ProductCategory]:
        response = await self._http.get_list("/public/categories", model=ProductCategory)
        return response.data

    async def get_category(self, id_or_slug: int | str) -> ProductCategory:
        return self._parse(ProductCategory, await self._http.get(f"/public/categories/{id_or_slug}"))

    async def category_products(
        self,
        category_id_or_slug: int | str,
        params: ListParams | PayloadLike | None = None,
    ) -> ListResponse[Product]:
        return await self._http.get_list(
            f"/public/categories/{category_id_or_slug}/products",
            to_payload(params),
            model=Product,
        )

    # Carrito

    async def get_cart(self) -> Cart:
        return self._parse(Cart, await self._http.get("/cart"))

    async def add_to_cart(self, data: AddToCartData | PayloadLike) -> Cart:
        return self._parse(Cart, await self._http.post("/cart/items", to_payload(data)))

    async def update_cart_item(self, item_id: int, data: UpdateCartItemData | PayloadLike) -> Cart:
        return self._parse(Cart, await self._http.put(f"/cart/items/{item_id}", to_payload(data)))

    async def remove_from_cart(self, item_id: int) -> Cart:
        return self._parse(Cart, await self._http.delete(f"/cart/items/{item_id}"))

    async def clear_cart(self) -> None:
        await self._http.delete("/cart")

    # Pedidos (requieren auth)

    async def list_orders(self, params: ListParams | PayloadLike | None = None) -> ListResponse[Order]:
        """Filtros: `status`, `payment_status`, `start_date`, `end_date`."""

        return await self._http.get_list("/orders", to_payload(params), model=Order)

    async def get_order(self, id_or_number: int | str) -> Order:
        return self._parse(Order, await self._http.get(f"/orders/{id_or_number}"))

    async def create_order(self, data: CreateOrderData | PayloadLike) -> Order:
        """Crea un pedido a partir del carrito actual."""

        return self._parse(Order, await self._http.post("/orders", to_payload(data)))

    async def cancel_order(self, order_id: int) -> Order:
        return self._parse(Order, await self._http.post(f"/orders/{order_id}/cancel"))

    # Pagos

    async def get_payment(self, order_id: int) -> Payment:
        return self._parse(Payment, await self._http.get(f"/orders/{order_id}/payment"))

    async def prepare_payment(self, data: PaymentReadyData | PayloadLike) -> dict[str, Any]:
        """Prepara el pago y devuelve los datos para el widget (payment key, etc.)."""

        return await self._http.post("/payments/ready", to_payload(data))

    async def confirm_payment(self, data: PaymentConfirmData | PayloadLike) -> Payment:
        """Confirma el pago tras la redirección del proveedor."""

        return self._parse(Payment, await self._http.post("/payments/confirm", to_payload(data)))

    async def cancel_payment(self, payment_id: int, data: PaymentCancelData | PayloadLike) -> Payment:
        return self._parse(
            Payment,
            await self._http.post(f"/payments/{payment_id}/cancel", to_payload(data)),
        )

    # Cupones

    async def validate_coupon(self, code: str, order_amount: float) -> CouponValidation:
        response = await self._http.post(
            "/coupons/validate",
            {"code": code, "order_amount": order_amount},
        )
        return self._parse(CouponValidation, response)

    async def my_coupons(self) -> list[Coupon]:
        response = await self._http.get_list("/coupons", model=Coupon)
        return response.data
