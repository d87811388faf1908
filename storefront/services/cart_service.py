# storefront/services/cart_service.py
from decimal import Decimal
from typing import Any, Dict, List

from pydantic import TypeAdapter, ValidationError

from storefront.domain.schemas import CartLine, CartOut, Product
from storefront.services.cart_storage import CartStorage
from storefront.utils.settings import CART_STORAGE_KEY
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_snapshot_adapter = TypeAdapter(List[CartLine])


def line_from_product(product: Product, quantity: int = 1) -> CartLine:
    return CartLine(
        product_id=product.id,
        name=product.name,
        display_name=product.display_name,
        unit_price=product.price,
        image_ref=product.image_ref,
        quantity=quantity,
    )


class CartService:
    """
    Koszyk klienta, jedna linia na product_id.

    commands (add, update, remove, clear) zmieniaja stan i zapisuja snapshot
    query (totals, lookups) tylko odczyt

    Snapshot jest ladowany w konstruktorze, reload() tylko gdy wolajacy czekal na await.
    """

    def __init__(self, storage: CartStorage, key: str = CART_STORAGE_KEY):
        self.storage = storage
        self.key = key
        self._lines: List[CartLine] = self._load()

    def _load(self) -> List[CartLine]:
        try:
            raw = self.storage.get(self.key)
        except Exception as e:
            logger.error(f"Failed to load cart {self.key}: {e}")
            return []

        if raw is None:
            return []

        try:
            lines = _snapshot_adapter.validate_json(raw)
        except ValidationError as e:
            return self._discard(f"{e.error_count()} validation errors")

        if len({line.product_id for line in lines}) != len(lines):
            # jedna linia na product_id, duplikat = uszkodzony snapshot
            return self._discard("duplicate product_id")

        return lines

    def _discard(self, reason: str) -> List[CartLine]:
        # uszkodzony snapshot - kasujemy i startujemy z pustym koszykiem
        logger.warning(f"Discarding corrupt cart snapshot under {self.key}: {reason}")
        try:
            self.storage.remove(self.key)
        except Exception as e:
            logger.error(f"Failed to remove cart {self.key}: {e}")
        return []

    def reload(self) -> None:
        """Ponowny odczyt snapshotu, np. po await w trakcie ktorego inny request zmienil koszyk."""
        self._lines = self._load()

    def _persist(self) -> None:
        # fire-and-forget, wolajacy nie dostaje potwierdzenia zapisu
        try:
            self.storage.set(self.key, _snapshot_adapter.dump_json(self._lines).decode())
        except Exception as e:
            logger.error(f"Failed to persist cart {self.key}: {e}")

    def _find(self, product_id: int) -> CartLine | None:
        return next((line for line in self._lines if line.product_id == product_id), None)

    # query
    @property
    def items(self) -> List[CartLine]:
        return [line.model_copy() for line in self._lines]

    def get_total_amount(self) -> Decimal:
        return sum((line.unit_price * line.quantity for line in self._lines), Decimal("0.00"))

    def get_total_items(self) -> int:
        return sum(line.quantity for line in self._lines)

    def is_in_cart(self, product_id: int) -> bool:
        return self._find(product_id) is not None

    def get_item_quantity(self, product_id: int) -> int:
        line = self._find(product_id)
        return line.quantity if line else 0

    def snapshot(self) -> CartOut:
        return CartOut(
            items=self.items,
            total_amount=self.get_total_amount(),
            total_items=self.get_total_items(),
        )

    # commands
    def add_to_cart(self, line: CartLine | Dict[str, Any]) -> None:
        if not isinstance(line, CartLine):
            try:
                line = CartLine.model_validate(line)
            except ValidationError:
                logger.warning(f"Ignoring malformed cart line: {line!r}")
                return

        existing = self._find(line.product_id)
        if existing:
            logger.info(
                f"Product {line.product_id} already in cart, quantity "
                f"{existing.quantity} -> {existing.quantity + line.quantity}"
            )
            existing.quantity += line.quantity
        else:
            logger.info(f"Adding product {line.product_id} to cart")
            self._lines.append(line.model_copy())

        self._persist()

    def update_quantity(self, product_id: int, quantity: int) -> None:
        if quantity < 1:
            self.remove_from_cart(product_id)
            return

        line = self._find(product_id)
        if line:
            line.quantity = quantity
        self._persist()

    def remove_from_cart(self, product_id: int) -> None:
        self._lines = [line for line in self._lines if line.product_id != product_id]
        self._persist()

    def clear_cart(self) -> None:
        self._lines = []
        self._persist()

    def deduct(self, lines: List[CartLine]) -> None:
        """
        Odejmuje zamówione ilości od koszyka, jeden zapis na końcu.
        Pozycje dodane w międzyczasie zostają w koszyku.
        """
        ordered = {line.product_id: line.quantity for line in lines}
        remaining = []
        for line in self._lines:
            left = line.quantity - ordered.get(line.product_id, 0)
            if left >= 1:
                line.quantity = left
                remaining.append(line)
        self._lines = remaining
        self._persist()
