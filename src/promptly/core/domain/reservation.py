"""DTOs de reservas: servicios, staff, horarios y reservas."""

from __future__ import annotations

from pydantic import Field

from promptly.core.domain.common import ApiModel, RequestModel


class ReservationStaffSummary(ApiModel):
    id: int
    name: str | None = None
    avatar: str | None = None


class ReservationStaff(ApiModel):
    id: int
    name: str | None = None
    avatar: str | None = None
    bio: str | None = None


class ReservationService(ApiModel):
    id: int
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    thumbnail: str | None = None
    duration: int = Field(default=0, description="Duración en minutos.")
    price: float = 0
    requires_staff: bool = False
    requires_payment: bool = False
    deposit: float = 0
    staffs: list[ReservationStaffSummary] = Field(default_factory=list)


class ReservationSlot(ApiModel):
    time: str
    available: bool = True
    staff_id: int | None = None


class BookableDateRange(ApiModel):
    start: str | None = None
    end: str | None = None


class ReservationSettings(ApiModel):
    timezone: str | None = None
    slot_interval: int | None = None
    min_notice_hours: int | None = None
    max_advance_days: int | None = None
    cancellation_hours: int | None = None
    allow_online_payment: bool = False
    bookable_date_range: BookableDateRange | None = None


class ReservedServiceSummary(ApiModel):
    id: int
    name: str | None = None
    duration: int | None = None


class Reservation(ApiModel):
    id: int
    reservation_number: str | None = None
    status: str = Field(default="pending", description="pending | confirmed | completed | cancelled | no_show")
    status_label: str | None = None
    reservation_date: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    time_range: str | None = None
    customer_name: str | None = None
    customer_phone: str | None = None
    customer_email: str | None = None
    price: float = 0
    deposit: float = 0
    payment_status: str = Field(default="pending", description="pending | paid | refunded | partial")
    payment_status_label: str | None = None
    customer_memo: str | None = None
    can_cancel: bool = False
    service: ReservedServiceSummary | None = None
    staff: ReservationStaffSummary | None = None
    created_at: str | None = None


class CreateReservationResult(ApiModel):
    reservation: Reservation
    requires_payment: bool = False
    deposit: float = 0


class CreateReservationData(RequestModel):
    service_id: int
    reservation_date: str = Field(..., description="YYYY-MM-DD")
    start_time: str = Field(..., description="HH:mm")
    customer_name: str
    staff_id: int | None = None
    customer_phone: str | None = None
    customer_email: str | None = None
    customer_memo: str | None = None


class AvailableDatesParams(RequestModel):
    service_id: int
    staff_id: int | None = None
    start_date: str | None = None
    end_date: str | None = None


class AvailableSlotsParams(RequestModel):
    service_id: int
    date: str
    staff_id: int | None = None
