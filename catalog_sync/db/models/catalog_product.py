from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from catalog_sync.db.models.base import BaseModel

@dataclass(kw_only=True)
class CatalogProductRecord(BaseModel):
    """A row of the products table.

    Root rows (``init=True``) describe a platform product and never have a
    ``parent_id``. Child rows (``init=False``) describe one variant and point
    at the generated ``product_id`` of their root row.
    """
    parent_id: Optional[str] = None
    init: bool = True
    external_id: Optional[str] = None
    search_text: Optional[str] = None
    name: Optional[str] = None
    price: Optional[float] = None
    image: Optional[str] = None
    json_object: Dict[str, Any] = field(default_factory=dict)
    sku: Optional[str] = None
    store_product_id: Optional[str] = None

    @property
    def is_root(self) -> bool:
        return self.init

    @classmethod
    def from_dict(cls, data: dict) -> 'CatalogProductRecord':
        record = super().from_dict(data)
        if isinstance(record.price, str):
            # NUMERIC columns come back from PostgREST as strings
            try:
                record.price = float(record.price)
            except ValueError:
                pass
        return record
