"""
Base pydantic partagée par les schémas de l'API.
- Attributs Python en snake_case, JSON en camelCase (customerEmail, orderId, receiptUrl...).
- Accepte les deux formes en entrée; les réponses FastAPI sortent en camelCase.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
