# storefront/repos/product_repo.py
from typing import Dict, List

from storefront.domain.schemas import CategoryCount, Product
from storefront.repos.record_store import RecordStore
from storefront.utils.settings import FEATURED_LIMIT


class ProductRepo(RecordStore[Product]):
    model = Product
    entity_name = "Product"
    # produkt dostaje updated_at dopiero przy pierwszej edycji
    stamp_updated_on_create = False

    async def get_by_category(self, category: str) -> List[Product]:
        return await self.find(lambda p: p.category == category and p.is_active)

    async def get_featured(self, limit: int = FEATURED_LIMIT) -> List[Product]:
        active = await self.find(lambda p: p.is_active)
        return active[:limit]

    async def get_categories(self) -> List[CategoryCount]:
        active = await self.find(lambda p: p.is_active)

        # dict trzyma kolejnosc pierwszego wystapienia
        counts: Dict[str, int] = {}
        for product in active:
            counts[product.category] = counts.get(product.category, 0) + 1

        return [CategoryCount(name=name, count=count) for name, count in counts.items()]

    async def search(self, query: str) -> List[Product]:
        needle = query.lower()

        def matches(p: Product) -> bool:
            fields = (p.name, p.display_name, p.description, p.category)
            return any(f and needle in f.lower() for f in fields)

        return await self.find(lambda p: p.is_active and matches(p))
