"""Application service: fertilizer catalog use cases."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cactus_shop.application.result import ServiceResult, service_err, service_ok
from cactus_shop.domain.exceptions import DomainException, EntityNotFoundError
from cactus_shop.domain.model.cactus import CareLevel
from cactus_shop.domain.model.fertilizer import Fertilizer
from cactus_shop.domain.model.identifiers import FertilizerId
from cactus_shop.domain.model.value_objects import Money
from cactus_shop.domain.repository.fertilizer_repository import FertilizerRepository

logger = logging.getLogger(__name__)


class FertilizerService:

    def __init__(self, fertilizer_repo: FertilizerRepository) -> None:
        self._fertilizer_repo = fertilizer_repo

    def create_fertilizer(
        self,
        name: str,
        price: Money,
        volume_ml: int,
        recommended_for: Iterable[CareLevel],
    ) -> ServiceResult[Fertilizer]:
        try:
            fertilizer = Fertilizer.create(name, price, volume_ml, recommended_for)
        except DomainException as exc:
            logger.debug("Rejected fertilizer %r: %s", name, exc)
            return service_err(exc)

        self._fertilizer_repo.save(fertilizer)
        logger.info("Added fertilizer %s (%s)", fertilizer.id, fertilizer.name)
        return service_ok(fertilizer)

    def get_fertilizer(self, fertilizer_id: FertilizerId) -> Fertilizer | None:
        return self._fertilizer_repo.get_by_id(fertilizer_id)

    def list_fertilizers(self) -> list[Fertilizer]:
        return self._fertilizer_repo.list_all()

    def list_for_care_level(self, care_level: CareLevel) -> list[Fertilizer]:
        return [
            f for f in self._fertilizer_repo.list_all()
            if f.is_recommended_for(care_level)
        ]

    def update_price(
        self, fertilizer_id: FertilizerId, new_price: Money
    ) -> ServiceResult[Fertilizer]:
        fertilizer = self._fertilizer_repo.get_by_id(fertilizer_id)
        if fertilizer is None:
            return service_err(
                EntityNotFoundError(f"Fertilizer not found: {fertilizer_id}")
            )

        fertilizer.update_price(new_price)
        self._fertilizer_repo.save(fertilizer)
        return service_ok(fertilizer)

    def delete_fertilizer(self, fertilizer_id: FertilizerId) -> bool:
        return self._fertilizer_repo.delete(fertilizer_id)
