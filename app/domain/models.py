"""
Pydantic models for backend payloads.

The backend speaks camelCase JSON; attributes are snake_case through an
alias generator. Unknown fields are ignored so a growing backend contract
never breaks the bot.
"""
from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


def _money(value: Any) -> Decimal:
    if value in (None, ""):
        return Decimal("0")
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount: {value!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return amount


class Address(ApiModel):
    id: Optional[int] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    building: Optional[str] = None
    apartment: Optional[str] = None
    is_default: bool = False

    @property
    def label(self) -> str:
        parts = [self.street, self.building, self.apartment, self.city, self.state]
        return ", ".join(str(p) for p in parts if p) or f"#{self.id}"


class User(ApiModel):
    id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[Any] = None
    activate: Optional[bool] = None
    created_at: Optional[str] = None
    addresses: list[Address] = Field(default_factory=list)

    @property
    def display_name(self) -> str:
        full = " ".join(p for p in (self.first_name, self.last_name) if p)
        return full or self.name or self.email or f"#{self.id}"


class Shop(ApiModel):
    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    shop_type: Optional[str] = None
    verified: Optional[bool] = None
    status: Optional[str] = None
    description: Optional[str] = None
    rating: Optional[float] = None
    shop_address: Optional[Any] = None

    @property
    def account_status(self) -> str:
        """Shops report either ``status`` or just the ``verified`` flag."""
        if self.status:
            return self.status.upper()
        if self.verified is True:
            return "APPROVED"
        if self.verified is False:
            return "SUSPENDED"
        return "PENDING"


class Product(ApiModel):
    id: Optional[int] = None
    name: str = ""
    description: Optional[str] = None
    price: Decimal = Decimal("0")
    stock: int = 0
    condition: Optional[str] = None
    category_id: Optional[int] = None
    category_name: Optional[str] = None
    shop_id: Optional[int] = None
    shop_name: Optional[str] = None
    image_url: Optional[str] = None

    @field_validator("price", mode="before")
    @classmethod
    def _parse_price(cls, v: Any) -> Decimal:
        return _money(v)

    @property
    def in_stock(self) -> bool:
        return self.stock > 0


class Category(ApiModel):
    id: Optional[int] = None
    name: str = ""
    description: Optional[str] = None


class OrderItem(ApiModel):
    product_id: Optional[int] = None
    product_name: Optional[str] = None
    price: Decimal = Decimal("0")
    quantity: int = 1

    @field_validator("price", mode="before")
    @classmethod
    def _parse_price(cls, v: Any) -> Decimal:
        return _money(v)

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity


class Order(ApiModel):
    id: Optional[int] = None
    status: str = "PENDING"
    order_items: list[OrderItem] = Field(default_factory=list)
    total_price: Decimal = Decimal("0")
    payment_method: Optional[str] = None
    shop_name: Optional[str] = None
    user_id: Optional[int] = None
    delivery_address_id: Optional[int] = None
    delivery_address: Optional[Any] = None
    created_at: Optional[str] = None
    payment_id: Optional[int] = None

    @field_validator("total_price", mode="before")
    @classmethod
    def _parse_total_price(cls, v: Any) -> Decimal:
        return _money(v)


class RepairRequest(ApiModel):
    id: Optional[int] = None
    status: str = "SUBMITTED"
    user_id: Optional[int] = None
    shop_id: Optional[int] = None
    shop_name: Optional[str] = None
    device_category: Optional[str] = None
    description: Optional[str] = None
    delivery_address: Optional[Any] = None
    delivery_method: Optional[str] = None
    payment_method: Optional[str] = None
    price: Optional[Decimal] = None
    confirmed: Optional[bool] = None
    created_at: Optional[str] = None


class CartItem(ApiModel):
    id: Optional[int] = None
    product_id: Optional[int] = None
    product_name: str = ""
    product_price: Decimal = Decimal("0")
    quantity: int = 1

    @field_validator("product_price", mode="before")
    @classmethod
    def _parse_product_price(cls, v: Any) -> Decimal:
        return _money(v)

    @property
    def subtotal(self) -> Decimal:
        return self.product_price * self.quantity


class Cart(ApiModel):
    items: list[CartItem] = Field(default_factory=list)
    total_price: Optional[Decimal] = None


class Notification(ApiModel):
    id: Optional[int] = None
    title: Optional[str] = None
    message: str = ""
    type: Optional[str] = None
    read: bool = False
    timestamp: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("timestamp", "createdAt")
    )

    @field_validator("read", mode="before")
    @classmethod
    def _read_flag(cls, v: Any) -> bool:
        return bool(v)


class Offer(ApiModel):
    id: Optional[int] = None
    name: str = ""
    description: Optional[str] = None
    discount_type: str = "PERCENTAGE"
    discount_value: Decimal = Decimal("0")
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    shop_id: Optional[int] = None
    shop_name: Optional[str] = None
    status: Optional[str] = None

    @field_validator("discount_type", mode="before")
    @classmethod
    def _discount_type(cls, v: Any) -> str:
        value = str(v or "PERCENTAGE").strip().upper()
        return "FIXED_VALUE" if value in ("FIXED", "FIXED_VALUE", "AMOUNT") else "PERCENTAGE"

    @field_validator("discount_value", mode="before")
    @classmethod
    def _discount_value(cls, v: Any) -> Decimal:
        return _money(v)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _parse_date(cls, v: Any) -> Any:
        # Dates arrive as "YYYY-MM-DD" or ISO timestamps; stored as naive UTC
        if isinstance(v, str):
            if not v.strip():
                return None
            if "T" not in v:
                return datetime.fromisoformat(v[:10])
            v = datetime.fromisoformat(v.replace("Z", "+00:00"))
        if isinstance(v, datetime) and v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v


class StaffMember(ApiModel):
    """Delivery person or assigner, as listed by admins and assigners."""

    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    status: Optional[str] = None
    verified: Optional[bool] = None
    activate: Optional[bool] = None
    active_assignments: Optional[int] = None
    total_completed_deliveries: Optional[int] = None
    created_at: Optional[str] = None

    @property
    def account_status(self) -> str:
        if self.status:
            return self.status.upper()
        if self.verified is True:
            return "APPROVED"
        if self.verified is False and self.activate is False:
            return "SUSPENDED"
        return "PENDING"


class Transaction(ApiModel):
    id: Optional[int] = None
    amount: Decimal = Decimal("0")
    status: Optional[str] = None
    type: Optional[str] = None
    payment_method: Optional[str] = None
    created_at: Optional[str] = None
    user_id: Optional[int] = None

    @field_validator("amount", mode="before")
    @classmethod
    def _parse_amount(cls, v: Any) -> Decimal:
        return _money(v)


class Review(ApiModel):
    id: Optional[int] = None
    shop_id: Optional[int] = None
    user_id: Optional[int] = None
    rating: int = 0
    comment: Optional[str] = None


class Assignment(ApiModel):
    """Assignment log entry written when an assigner dispatches a courier."""

    id: Optional[int] = None
    order_id: Optional[int] = None
    repair_request_id: Optional[int] = None
    delivery_id: Optional[int] = None
    delivery_name: Optional[str] = None
    assigner_name: Optional[str] = None
    action: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[str] = None
