"""Application service: seller use cases."""

from __future__ import annotations

import logging
from collections.abc import Callable

from cactus_shop.application.result import ServiceResult, service_err, service_ok
from cactus_shop.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from cactus_shop.domain.model.identifiers import SellerId
from cactus_shop.domain.model.seller import Seller
from cactus_shop.domain.model.value_objects import Email
from cactus_shop.domain.repository.seller_repository import SellerRepository

logger = logging.getLogger(__name__)


class SellerService:

    def __init__(self, seller_repo: SellerRepository) -> None:
        self._seller_repo = seller_repo

    def register_seller(self, store_name: str, contact_email: str) -> ServiceResult[Seller]:
        try:
            seller = Seller.create(store_name, contact_email)
            self._seller_repo.add(seller)
        except DomainException as exc:
            logger.debug("Seller registration for %r rejected: %s", contact_email, exc)
            return service_err(exc)

        logger.info("Registered seller %s (%s)", seller.id, seller.store_name)
        return service_ok(seller)

    def get_seller(self, seller_id: SellerId) -> Seller | None:
        return self._seller_repo.get_by_id(seller_id)

    def get_seller_by_email(self, email: str) -> Seller | None:
        try:
            return self._seller_repo.get_by_email(Email(email))
        except ValidationError:
            return None

    def list_active_sellers(self) -> list[Seller]:
        return self._seller_repo.list_active()

    def list_sellers(self) -> list[Seller]:
        return self._seller_repo.list_all()

    def deactivate_seller(self, seller_id: SellerId) -> ServiceResult[Seller]:
        return self._apply(seller_id, Seller.deactivate)

    def activate_seller(self, seller_id: SellerId) -> ServiceResult[Seller]:
        return self._apply(seller_id, Seller.activate)

    def update_contact_email(self, seller_id: SellerId, new_email: str) -> ServiceResult[Seller]:
        return self._apply(seller_id, lambda s: s.update_contact_email(new_email))

    def delete_seller(self, seller_id: SellerId) -> bool:
        return self._seller_repo.delete(seller_id)

    # --- Internal helpers -----------------------------------------------------

    def _apply(
        self, seller_id: SellerId, operation: Callable[[Seller], None]
    ) -> ServiceResult[Seller]:
        seller = self._seller_repo.get_by_id(seller_id)
        if seller is None:
            return service_err(EntityNotFoundError(f"Seller not found: {seller_id}"))

        try:
            operation(seller)
            self._seller_repo.save(seller)
        except DomainException as exc:
            logger.debug("Seller %s update rejected: %s", seller_id, exc)
            return service_err(exc)

        return service_ok(seller)
