"""DTOs de comercio: productos, carrito, pedidos, pagos y cupones.

Los estados (`OrderStatus`, `PaymentStatus`, ...) se modelan como `str` para
no romper cuando el servidor agregue valores nuevos; los valores conocidos
se listan en cada `description`.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from promptly.core.domain.common import ApiModel, RequestModel


class ProductCategory(ApiModel):
    id: int
    slug: str | None = None
    name: str | None = None
    description: str | None = None
    image: str | None = None
    parent_id: int | None = None
    parent: ProductCategory | None = None
    children: list[ProductCategory] = Field(default_factory=list)
    products_count: int | None = None
    is_active: bool = True
    sort_order: int = 0
    created_at: str | None = None
    updated_at: str | None = None


class ProductOptionValue(ApiModel):
    id: int
    option_id: int | None = None
    value: str | None = None
    sort_order: int = 0


class ProductOption(ApiModel):
    id: int
    product_id: int | None = None
    name: str | None = None
    sort_order: int = 0
    values: list[ProductOptionValue] = Field(default_factory=list)


class ProductVariant(ApiModel):
    id: int
    product_id: int | None = None
    sku: str | None = None
    price: float | None = None
    compare_price: float | None = None
    stock_quantity: int = 0
    option_values: dict[str, str] = Field(default_factory=dict)
    is_active: bool = True
    sort_order: int = 0


class Product(ApiModel):
    id: int
    category_id: int | None = None
    category: ProductCategory | None = None
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    content: str | None = None
    price: float = 0
    compare_price: float | None = None
    cost_price: float | None = None
    sku: str | None = None
    stock_quantity: int = 0
    track_inventory: bool = False
    thumbnail: str | None = None
    images: list[str] = Field(default_factory=list)
    status: str = Field(default="active", description="draft | active | inactive")
    is_featured: bool = False
    has_options: bool = False
    option_type: str | None = Field(default=None, description="single | combination")
    options: list[ProductOption] = Field(default_factory=list)
    variants: list[ProductVariant] = Field(default_factory=list)
    weight: float | None = None
    meta: dict[str, Any] | None = None
    sort_order: int = 0
    discount_percent: float | None = None
    in_stock: bool | None = None
    min_price: float | None = None
    max_price: float | None = None
    created_at: str | None = None
    updated_at: str | None = None


class CartItem(ApiModel):
    id: int
    cart_id: int | None = None
    product_id: int | None = None
    variant_id: int | None = None
    product: Product | None = None
    variant: ProductVariant | None = None
    quantity: int = 1
    price: float = 0
    options: dict[str, str] | None = None
    created_at: str | None = None
    updated_at: str | None = None


class Cart(ApiModel):
    id: int | None = None
    member_id: int | None = None
    session_id: str | None = None
    items: list[CartItem] = Field(default_factory=list)
    total: float = 0
    total_quantity: int = 0
    item_count: int = 0
    created_at: str | None = None
    updated_at: str | None = None


class OrderItem(ApiModel):
    id: int
    order_id: int | None = None
    product_id: int | None = None
    variant_id: int | None = None
    product_name: str | None = None
    variant_name: str | None = None
    thumbnail: str | None = None
    quantity: int = 1
    price: float = 0
    total: float = 0
    options: dict[str, str] | None = None


class Payment(ApiModel):
    id: int
    order_id: int | None = None
    payment_key: str | None = None
    order_id_toss: str | None = None
    method: str | None = Field(
        default=None,
        description="CARD | VIRTUAL_ACCOUNT | TRANSFER | MOBILE_PHONE | *_GIFT_CERTIFICATE",
    )
    method_label: str | None = None
    method_detail: str | None = None
    amount: float = 0
    status: str = Field(default="pending", description="pending | ready | done | cancelled | failed")
    status_label: str | None = None
    approved_at: str | None = None
    cancelled_at: str | None = None
    cancel_amount: float | None = None
    cancel_reason: str | None = None
    receipt_url: str | None = None
    card_number: str | None = None
    card_type: str | None = None
    installment_months: int | None = None
    virtual_account_number: str | None = None
    virtual_account_bank: str | None = None
    virtual_account_due_date: str | None = None
    error_code: str | None = None
    error_message: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class Order(ApiModel):
    id: int
    member_id: int | None = None
    order_number: str | None = None
    status: str = Field(
        default="pending",
        description="pending | paid | preparing | shipping | delivered | cancelled | refunded",
    )
    status_label: str | None = None
    subtotal: float = 0
    discount_amount: float = 0
    shipping_fee: float = 0
    total: float = 0
    coupon_id: int | None = None
    coupon_code: str | None = None
    payment_method: str | None = None
    payment_status: str = "pending"
    payment_status_label: str | None = None
    paid_at: str | None = None
    shipping_name: str | None = None
    shipping_phone: str | None = None
    shipping_zipcode: str | None = None
    shipping_address: str | None = None
    shipping_address_detail: str | None = None
    shipping_memo: str | None = None
    shipping_company: str | None = None
    tracking_number: str | None = None
    shipped_at: str | None = None
    delivered_at: str | None = None
    orderer_name: str | None = None
    orderer_email: str | None = None
    orderer_phone: str | None = None
    items: list[OrderItem] = Field(default_factory=list)
    payment: Payment | None = None
    created_at: str | None = None
    updated_at: str | None = None


class Coupon(ApiModel):
    id: int
    code: str | None = None
    name: str | None = None
    description: str | None = None
    type: str = Field(default="fixed", description="fixed | percent")
    value: float = 0
    min_order_amount: float | None = None
    max_discount_amount: float | None = None
    usage_limit: int | None = None
    usage_count: int = 0
    per_user_limit: int | None = None
    starts_at: str | None = None
    expires_at: str | None = None
    is_active: bool = True
    created_at: str | None = None
    updated_at: str | None = None


class CouponValidation(ApiModel):
    valid: bool = False
    message: str | None = None
    discount_amount: float | None = None
    coupon: Coupon | None = None


class AddToCartData(RequestModel):
    product_id: int
    quantity: int
    variant_id: int | None = None
    options: dict[str, str] | None = None


class UpdateCartItemData(RequestModel):
    quantity: int


class CreateOrderData(RequestModel):
    orderer_name: str
    orderer_email: str
    orderer_phone: str
    shipping_name: str
    shipping_phone: str
    shipping_zipcode: str
    shipping_address: str
    shipping_address_detail: str | None = None
    shipping_memo: str | None = None
    coupon_code: str | None = None
    payment_method: str | None = None


class PaymentReadyData(RequestModel):
    order_id: int
    amount: float
    order_name: str
    customer_name: str
    customer_email: str
    success_url: str
    fail_url: str


class PaymentConfirmData(RequestModel):
    payment_key: str
    order_id: str
    amount: float


class PaymentCancelData(RequestModel):
    cancel_reason: str
    cancel_amount: float | None = None
