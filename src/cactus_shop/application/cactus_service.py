"""Application service: cactus catalog use cases."""

from __future__ import annotations

import logging

from cactus_shop.application.result import ServiceResult, service_err, service_ok
from cactus_shop.domain.exceptions import DomainException, EntityNotFoundError
from cactus_shop.domain.model.cactus import Cactus, CareLevel
from cactus_shop.domain.model.identifiers import CactusId
from cactus_shop.domain.model.value_objects import Money
from cactus_shop.domain.repository.cactus_repository import CactusRepository

logger = logging.getLogger(__name__)


class CactusService:

    def __init__(self, cactus_repo: CactusRepository) -> None:
        self._cactus_repo = cactus_repo

    def create_cactus(
        self, name: str, price: Money, care_level: CareLevel
    ) -> ServiceResult[Cactus]:
        try:
            cactus = Cactus.create(name, price, care_level)
        except DomainException as exc:
            logger.debug("Rejected cactus %r: %s", name, exc)
            return service_err(exc)

        self._cactus_repo.save(cactus)
        logger.info("Added cactus %s (%s)", cactus.id, cactus.name)
        return service_ok(cactus)

    def get_cactus(self, cactus_id: CactusId) -> Cactus | None:
        return self._cactus_repo.get_by_id(cactus_id)

    def list_cacti(self) -> list[Cactus]:
        return self._cactus_repo.list_all()

    def list_available_cacti(self) -> list[Cactus]:
        return [c for c in self._cactus_repo.list_all() if c.is_available]

    def update_price(self, cactus_id: CactusId, new_price: Money) -> ServiceResult[Cactus]:
        cactus = self._cactus_repo.get_by_id(cactus_id)
        if cactus is None:
            return service_err(EntityNotFoundError(f"Cactus not found: {cactus_id}"))

        cactus.update_price(new_price)
        self._cactus_repo.save(cactus)
        return service_ok(cactus)

    def mark_as_unavailable(self, cactus_id: CactusId) -> ServiceResult[Cactus]:
        cactus = self._cactus_repo.get_by_id(cactus_id)
        if cactus is None:
            return service_err(EntityNotFoundError(f"Cactus not found: {cactus_id}"))

        cactus.mark_as_unavailable()
        self._cactus_repo.save(cactus)
        return service_ok(cactus)

    def mark_as_available(self, cactus_id: CactusId) -> ServiceResult[Cactus]:
        cactus = self._cactus_repo.get_by_id(cactus_id)
        if cactus is None:
            return service_err(EntityNotFoundError(f"Cactus not found: {cactus_id}"))

        cactus.mark_as_available()
        self._cactus_repo.save(cactus)
        return service_ok(cactus)

    def delete_cactus(self, cactus_id: CactusId) -> bool:
        return self._cactus_repo.delete(cactus_id)
