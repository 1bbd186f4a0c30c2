# module photostore.catalog.models
from pydantic import ConfigDict, Field

from photostore.utils.schemas import CamelModel


class Product(CamelModel):
    """Produit du catalogue; prix en centimes (unités mineures)."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    price: int = Field(ge=0)
    image: str = ""
