from __future__ import annotations

from promptly.adapters.resources.base import BaseResource
from promptly.core.domain.common import ListParams, ListResponse, PayloadLike, to_payload
from promptly.core.domain.form import Form, FormSubmission


class FormsResource(BaseResource):
    async def list(self, params: ListParams | PayloadLike | None = None) -> ListResponse[Form]:
        return await self._http.get_list("/public/forms", to_payload(params), model=Form)

    async def get(self, id_or_slug: int | str) -> Form:
        return self._parse(Form, await self._http.get(f"/public/forms/{id_or_slug}"))

    async def submit(self, form_id_or_slug: int | str, data: PayloadLike) -> FormSubmission:
        """Envía los valores del formulario (`nombre_de_campo -> valor`)."""

        response = await self._http.post(f"/public/forms/{form_id_or_slug}/submit", to_payload(data))
        return self._parse(FormSubmission, response)

    # Requieren auth

    async def my_submissions(self, params: ListParams | PayloadLike | None = None) -> ListResponse[FormSubmission]:
        """Envíos del usuario. Filtros extra: `form_id`, `status`."""

        return await self._http.get_list("/form-submissions", to_payload(params), model=FormSubmission)

    async def get_submission(self, submission_id: int) -> FormSubmission:
        return self._parse(FormSubmission, await self._http.get(f"/form-submissions/{submission_id}"))
