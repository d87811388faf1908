# storefront/domain/schemas.py
import re
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class PaymentMethod(str, Enum):
    COD = "cod"
    UPI = "upi"
    CARD = "card"
    NETBANKING = "netbanking"


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


# =====================================================
# CART
# =====================================================
class CartLine(BaseModel):
    """Jedna pozycja koszyka: produkt i ilość."""

    product_id: int = Field(..., gt=0)
    name: str
    display_name: str | None = None
    unit_price: Decimal = Field(..., ge=0)
    image_ref: str | None = None
    quantity: int = Field(1, ge=1)


class CartItemIn(BaseModel):
    """Schema dla dodawania produktu z katalogu do koszyka."""

    product_id: int = Field(..., gt=0, description="ID produktu (musi być > 0)")
    quantity: int = Field(1, gt=0, description="Ilość produktu (musi być > 0)")


class CartQuantityIn(BaseModel):
    # < 1 usuwa pozycje z koszyka
    quantity: int


class CartOut(BaseModel):
    items: List[CartLine]
    total_amount: Decimal
    total_items: int


# =====================================================
# PRODUCTS
# =====================================================
class ProductBase(BaseModel):
    name: str = Field(..., min_length=1)
    display_name: str | None = None
    category: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0)
    description: str | None = None
    image_ref: str | None = None
    stock: int | None = Field(None, ge=0)
    is_active: bool = True


class ProductCreate(ProductBase):
    """Schema dla tworzenia produktu (admin)."""


class ProductUpdate(BaseModel):
    """
    Częściowa edycja produktu. Scalane są tylko pola wysłane przez klienta.
    Pola wymagane w Product nie mogą przyjść jako null.
    """

    name: str | None = Field(None, min_length=1)
    display_name: str | None = None
    category: str | None = Field(None, min_length=1)
    price: Decimal | None = Field(None, ge=0)
    description: str | None = None
    image_ref: str | None = None
    stock: int | None = Field(None, ge=0)
    is_active: bool | None = None

    @model_validator(mode="after")
    def required_fields_not_null(self) -> "ProductUpdate":
        nulls = [
            name
            for name in ("name", "category", "price", "is_active")
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if nulls:
            raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return self


class Product(ProductBase):
    id: int
    created_at: datetime
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class CategoryCount(BaseModel):
    name: str
    count: int


# =====================================================
# ORDERS
# =====================================================
class OrderBase(BaseModel):
    customer_name: str
    customer_phone: str
    email: str | None = None
    delivery_address: str
    items: List[CartLine]
    total_amount: Decimal = Field(..., ge=0)
    payment_method: PaymentMethod = PaymentMethod.COD
    status: OrderStatus = OrderStatus.PENDING


class OrderCreate(OrderBase):
    pass


class Order(OrderBase):
    id: int
    created_at: datetime
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class CheckoutIn(BaseModel):
    """Dane kontaktowe, adres i płatność podane przy checkout."""

    customer_name: str = Field(..., min_length=1, max_length=100)
    customer_phone: str
    email: str | None = None
    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    pincode: str = Field(..., pattern=r"^[0-9]{6}$")
    payment_method: PaymentMethod = PaymentMethod.COD

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("customer_phone")
    @classmethod
    def phone_has_ten_digits(cls, value: str) -> str:
        if not re.fullmatch(r"[0-9]{10}", re.sub(r"\D", "", value)):
            raise ValueError("Phone number must have 10 digits")
        return value

    @property
    def delivery_address(self) -> str:
        return f"{self.address}, {self.city}, {self.pincode}"


# =====================================================
# ADMIN
# =====================================================
class DashboardStats(BaseModel):
    total_products: int
    active_products: int
    total_orders: int
    pending_orders: int
    total_revenue: Decimal
    total_categories: int
    recent_orders: List[Order]
