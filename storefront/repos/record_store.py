# storefront/repos/record_store.py
import asyncio
import random
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, Iterable, List, Tuple, Type, TypeVar

from pydantic import BaseModel

from storefront.domain.errors import NotFoundError
from storefront.utils.settings import STORE_LATENCY_MIN_MS, STORE_LATENCY_MAX_MS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class RecordStore(Generic[T]):
    """
    Kolekcja encji w pamięci, adresowana dodatnim id.

    -kazda operacja najpierw czeka losowe opoznienie (symulowana baza)
    -kazdy odczyt zwraca kopie, wolajacy nie trzyma zywego rekordu
    -id z licznika sklepu, usuniete id nie wraca
    """

    model: Type[T]
    entity_name = "Record"
    stamp_updated_on_create = True

    def __init__(
        self,
        records: Iterable[T | Dict[str, Any]] | None = None,
        latency_ms: Tuple[int, int] | None = None,
    ):
        self._records: List[T] = [
            self.model.model_validate(r).model_copy(deep=True) for r in (records or [])
        ]
        self._last_id = max((r.id for r in self._records), default=0)
        self.latency_ms = latency_ms or (STORE_LATENCY_MIN_MS, STORE_LATENCY_MAX_MS)

    def draw_latency(self) -> float:
        """Sekundy opóźnienia, rozkład jednostajny w [min_ms, max_ms)."""
        low, high = self.latency_ms
        return (low + random.random() * (high - low)) / 1000

    async def _delay(self) -> None:
        await asyncio.sleep(self.draw_latency())

    @staticmethod
    def _copy(record: T) -> T:
        return record.model_copy(deep=True)

    def _index_of(self, record_id: int) -> int:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        raise NotFoundError(self.entity_name, record_id)

    # query
    async def get_all(self) -> List[T]:
        await self._delay()
        return [self._copy(r) for r in self._records]

    async def get_by_id(self, record_id: int) -> T:
        await self._delay()
        return self._copy(self._records[self._index_of(record_id)])

    async def find(self, predicate: Callable[[T], bool]) -> List[T]:
        await self._delay()
        return [self._copy(r) for r in self._records if predicate(r)]

    # commands
    async def create(self, data: BaseModel | Dict[str, Any]) -> T:
        payload = data.model_dump() if isinstance(data, BaseModel) else dict(data)
        await self._delay()

        # id i append w jednym kroku, bez await pomiedzy
        new_id = self._last_id + 1
        now = _now()
        record = self.model.model_validate(
            {
                **payload,
                "id": new_id,
                "created_at": now,
                "updated_at": now if self.stamp_updated_on_create else None,
            }
        )
        self._last_id = new_id
        self._records.append(record)

        logger.info(f"Created {self.entity_name} {new_id}")
        return self._copy(record)

    async def update(self, record_id: int, partial: BaseModel | Dict[str, Any]) -> T:
        changes = (
            partial.model_dump(exclude_unset=True)
            if isinstance(partial, BaseModel)
            else dict(partial)
        )
        await self._delay()

        index = self._index_of(record_id)
        merged = self.model.model_validate(
            {
                **self._records[index].model_dump(),
                **changes,
                "id": record_id,
                "updated_at": _now(),
            }
        )
        self._records[index] = merged

        logger.info(f"Updated {self.entity_name} {record_id}: {sorted(changes)}")
        return self._copy(merged)

    async def delete(self, record_id: int) -> T:
        await self._delay()

        index = self._index_of(record_id)
        removed = self._records.pop(index)

        logger.info(f"Deleted {self.entity_name} {record_id}")
        return self._copy(removed)
