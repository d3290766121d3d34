"""Modelos y entidades del dominio.

Por qué:
- Aquí viven los DTOs del API remoto (Pydantic v2), de solo lectura.
- El dominio no conoce HTTP ni la CLI: solo la forma de los recursos.
"""

from promptly.core.domain.auth import (
    AuthResponse,
    ForgotPasswordData,
    LoginCredentials,
    Member,
    RegisterData,
    ResetPasswordData,
    SocialAuthUrl,
    SocialProvider,
    UpdateProfileData,
)
from promptly.core.domain.blog import BlogPost
from promptly.core.domain.board import (
    Board,
    BoardComment,
    BoardPost,
    BoardSettings,
    CreateCommentData,
    CreatePostData,
    UpdateCommentData,
    UpdatePostData,
)
from promptly.core.domain.common import (
    DEFAULT_META,
    ApiModel,
    ListParams,
    ListResponse,
    Media,
    PaginationMeta,
)
from promptly.core.domain.entity import (
    CreateEntityRecordData,
    CustomEntity,
    EntityField,
    EntityRecord,
    EntitySchema,
    UpdateEntityRecordData,
)
from promptly.core.domain.form import (
    Form,
    FormField,
    FormFieldOption,
    FormFieldValidation,
    FormSettings,
    FormSubmission,
)
from promptly.core.domain.reservation import (
    AvailableDatesParams,
    AvailableSlotsParams,
    CreateReservationData,
    CreateReservationResult,
    Reservation,
    ReservationService,
    ReservationSettings,
    ReservationSlot,
    ReservationStaff,
    ReservationStaffSummary,
)
from promptly.core.domain.shop import (
    AddToCartData,
    Cart,
    CartItem,
    Coupon,
    CouponValidation,
    CreateOrderData,
    Order,
    OrderItem,
    Payment,
    PaymentCancelData,
    PaymentConfirmData,
    PaymentReadyData,
    Product,
    ProductCategory,
    ProductOption,
    ProductOptionValue,
    ProductVariant,
    UpdateCartItemData,
)

__all__ = [
    "DEFAULT_META",
    "AddToCartData",
    "ApiModel",
    "AuthResponse",
    "AvailableDatesParams",
    "AvailableSlotsParams",
    "BlogPost",
    "Board",
    "BoardComment",
    "BoardPost",
    "BoardSettings",
    "Cart",
    "CartItem",
    "Coupon",
    "CouponValidation",
    "CreateCommentData",
    "CreateEntityRecordData",
    "CreateOrderData",
    "CreatePostData",
    "CreateReservationData",
    "CreateReservationResult",
    "CustomEntity",
    "EntityField",
    "EntityRecord",
    "EntitySchema",
    "ForgotPasswordData",
    "Form",
    "FormField",
    "FormFieldOption",
    "FormFieldValidation",
    "FormSettings",
    "FormSubmission",
    "ListParams",
    "ListResponse",
    "LoginCredentials",
    "Media",
    "Member",
    "Order",
    "OrderItem",
    "PaginationMeta",
    "Payment",
    "PaymentCancelData",
    "PaymentConfirmData",
    "PaymentReadyData",
    "Product",
    "ProductCategory",
    "ProductOption",
    "ProductOptionValue",
    "ProductVariant",
    "RegisterData",
    "Reservation",
    "ReservationService",
    "ReservationSettings",
    "ReservationSlot",
    "ReservationStaff",
    "ReservationStaffSummary",
    "ResetPasswordData",
    "SocialAuthUrl",
    "SocialProvider",
    "UpdateCartItemData",
    "UpdateCommentData",
    "UpdateEntityRecordData",
    "UpdatePostData",
    "UpdateProfileData",
]
