# module photostore.orders.models
"""Schémas de la feature commandes.
- OrderItem/OrderRequest: corps de POST /api/orders, validés à la frontière.
- Order: réponse; le total est toujours recalculé côté serveur.
Les champs inconnus (ex: prix envoyés par le client) sont ignorés.
"""
from datetime import datetime
from typing import Any, List, Optional

from pydantic import field_validator, model_validator

from photostore.utils.schemas import CamelModel
from photostore.utils.validators import validate_email, validate_quantity


class OrderItem(CamelModel):
    id: str
    quantity: int

    @model_validator(mode="before")
    @classmethod
    def require_id_and_quantity(cls, data: Any) -> Any:
        if not isinstance(data, dict) or not data.get("id") or data.get("quantity") is None:
            raise ValueError("Invalid item structure: id and quantity required")
        return data

    @field_validator("quantity", mode="before")
    @classmethod
    def positive_quantity(cls, v: Any) -> int:
        return validate_quantity(v)


class OrderRequest(CamelModel):
    items: List[OrderItem] = []
    customer_email: Optional[str] = None

    @field_validator("items", mode="before")
    @classmethod
    def non_empty_items(cls, v: Any) -> Any:
        if not v:
            raise ValueError("No items in order")
        return v

    @field_validator("customer_email", mode="before")
    @classmethod
    def email_format(cls, v: Any) -> Optional[str]:
        return validate_email(v)

    @model_validator(mode="after")
    def items_present(self) -> "OrderRequest":
        # Couvre le cas où "items" est absent du corps (valeur par défaut non validée)
        if not self.items:
            raise ValueError("No items in order")
        return self


class Order(CamelModel):
    order_id: str
    items: List[OrderItem]
    total: int
    customer_email: Optional[str] = None
    created_at: datetime
