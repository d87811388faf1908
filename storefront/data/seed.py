# storefront/data/seed.py
from datetime import datetime, timezone
from typing import Any, Dict, List

# startowy katalog sklepu
_PRODUCTS = [
    {
        "id": 1,
        "name": "Basmati Rice 5kg",
        "display_name": "बासमती चावल 5 किलो",
        "category": "Rice & Grains",
        "price": "549.00",
        "description": "Long grain aged basmati rice",
        "image_ref": "https://images.unsplash.com/photo-1586201375761-83865001e31c",
        "stock": 40,
        "is_active": True,
    },
    {
        "id": 2,
        "name": "Whole Wheat Atta 10kg",
        "display_name": "गेहूं का आटा 10 किलो",
        "category": "Flour",
        "price": "420.00",
        "description": "Stone ground whole wheat flour",
        "image_ref": "https://images.unsplash.com/photo-1574323347407-f5e1ad6d020b",
        "stock": 25,
        "is_active": True,
    },
    {
        "id": 3,
        "name": "Toor Dal 1kg",
        "display_name": "तूर दाल 1 किलो",
        "category": "Pulses",
        "price": "165.00",
        "description": "Unpolished split pigeon peas",
        "image_ref": "https://images.unsplash.com/photo-1585996746464-2ee5a4d9f6b5",
        "stock": 60,
        "is_active": True,
    },
    {
        "id": 4,
        "name": "Mustard Oil 1L",
        "display_name": "सरसों का तेल 1 लीटर",
        "category": "Oil & Ghee",
        "price": "189.00",
        "description": "Cold pressed kachi ghani mustard oil",
        "image_ref": "https://images.unsplash.com/photo-1474979266404-7eaacbcd87c5",
        "stock": 30,
        "is_active": True,
    },
    {
        "id": 5,
        "name": "Sona Masoori Rice 10kg",
        "display_name": "सोना मसूरी चावल 10 किलो",
        "category": "Rice & Grains",
        "price": "799.00",
        "description": "Lightweight aromatic rice",
        "image_ref": "https://images.unsplash.com/photo-1536304993881-ff6e9eefa2a6",
        "stock": 0,
        "is_active": False,
    },
    {
        "id": 6,
        "name": "Moong Dal 1kg",
        "display_name": "मूंग दाल 1 किलो",
        "category": "Pulses",
        "price": "145.00",
        "description": "Split yellow moong",
        "image_ref": "https://images.unsplash.com/photo-1612257999756-9d1e4b9b0b1a",
        "stock": 45,
        "is_active": True,
    },
]


def seed_products() -> List[Dict[str, Any]]:
    now = datetime.now(timezone.utc)
    return [{**p, "created_at": now} for p in _PRODUCTS]
