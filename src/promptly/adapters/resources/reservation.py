"""Recurso de reservas.

Públicos: configuración, servicios, staff y disponibilidad.
Con auth: crear, listar, consultar y cancelar reservas propias.
"""

from __future__ import annotations

import builtins

from promptly.adapters.pagination import as_list
from promptly.adapters.resources.base import BaseResource
from promptly.core.domain.common import ListResponse, PayloadLike, to_payload
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
)


class ReservationResource(BaseResource):
    async def get_settings(self) -> ReservationSettings:
        return self._parse(ReservationSettings, await self._http.get("/public/reservations/settings"))

    async def list_services(self) -> builtins.list[ReservationService]:
        response = await self._http.get_list("/public/reservations/services", model=ReservationService)
        return response.data

    async def list_staff(self, service_id: int | None = None) -> builtins.list[ReservationStaff]:
        params = {"service_id": service_id} if service_id else None
        response = await self._http.get_list("/public/reservations/staffs", params, model=ReservationStaff)
        return response.data

    async def get_available_dates(self, params: AvailableDatesParams | PayloadLike) -> builtins.list[str]:
        """Fechas reservables (`YYYY-MM-DD`)."""

        return as_list(await self._http.get("/public/reservations/dates", to_payload(params)), str)

    async def get_available_slots(
        self,
        params: AvailableSlotsParams | PayloadLike,
    ) -> builtins.list[ReservationSlot]:
        return as_list(
            await self._http.get("/public/reservations/slots", to_payload(params)),
            ReservationSlot,
        )

    # Requieren auth

    async def create(self, data: CreateReservationData | PayloadLike) -> CreateReservationResult:
        """Crea la reserva; el resultado indica si requiere pago (depósito)."""

        return self._parse(CreateReservationResult, await self._http.post("/reservations", to_payload(data)))

    async def list(self, params: PayloadLike | None = None) -> ListResponse[Reservation]:
        """Filtros: `status`, `upcoming`, `past`, `page`, `per_page`."""

        return await self._http.get_list("/reservations", to_payload(params), model=Reservation)

    async def upcoming(self, limit: int = 10) -> builtins.list[Reservation]:
        response = await self._http.get_list(
            "/reservations",
            {"upcoming": True, "per_page": limit},
            model=Reservation,
        )
        return response.data

    async def past(self, limit: int = 10) -> builtins.list[Reservation]:
        response = await self._http.get_list(
            "/reservations",
            {"past": True, "per_page": limit},
            model=Reservation,
        )
        return response.data

    async def get(self, reservation_number: str) -> Reservation:
        return self._parse(Reservation, await self._http.get(f"/reservations/{reservation_number}"))

    async def cancel(self, reservation_number: str, reason: str | None = None) -> Reservation:
        body = {"reason": reason} if reason is not None else {}
        return self._parse(
            Reservation,
            await self._http.post(f"/reservations/{reservation_number}/cancel", body),
        )
