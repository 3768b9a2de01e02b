from __future__ import annotations

import logging

from lecturer_portal.errors import InvalidTransition, ValidationFailed
from lecturer_portal.models.registry import Consultation
from lecturer_portal.repositories.base import MutableRepository
from lecturer_portal.schemas.consultation import (
    ConsultationCreate,
    ConsultationOut,
    ConsultationUpdate,
)

logger = logging.getLogger("app.repositories.consultations")

DECISIONS = ("approved", "declined")


class ConsultationRepository(MutableRepository):
    model = Consultation
    out_schema = ConsultationOut
    create_schema = ConsultationCreate
    update_schema = ConsultationUpdate
    label = "Consultation"

    def order_by(self) -> tuple:
        return (Consultation.consultation_date.desc(),)

    def list(self, owner_id, status: str | None = None):
        criteria = [Consultation.status == status] if status else []
        return super().list(owner_id, *criteria)

    def insert_fields(self, data) -> dict:
        fields = data.model_dump()
        fields["status"] = "pending"
        return fields

    def set_status(self, row_id, status: str):
        """pending -> approved | declined; anything else raises InvalidTransition."""
        if status not in DECISIONS:
            raise ValidationFailed(f"status must be one of {list(DECISIONS)}")

        matched = self.client.update_where(
            Consultation,
            {"status": status},
            Consultation.id == row_id,
            Consultation.status == "pending",
        )
        if matched:
            logger.info("Consultation %s -> %s", row_id, status)
            return self.get(row_id)

        current = self.get(row_id)  # NotFound when missing
        raise InvalidTransition(f"Consultation is already {current.status}")
