from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr
from typing import Optional, Union, Dict, Any

from .models import Product

class ProductIn(BaseModel):
    """Body of POST and PUT /api/products.

    Only these fields are ever merged into a record; anything else the
    client sends is dropped.
    """
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    name: StrictStr
    price: Union[StrictInt, StrictFloat]
    description: Optional[StrictStr] = None
    category: Optional[StrictStr] = None
    in_stock: Optional[StrictBool] = Field(None, alias="inStock")

def _make_product(product_id: str, p: ProductIn) -> Product:
    return Product(
        id=product_id,
        name=p.name,
        description=p.description,
        price=p.price,
        category=p.category,
        in_stock=True if p.in_stock is None else p.in_stock,
    )

def _update_fields(p: ProductIn) -> Dict[str, Any]:
    fields = p.model_dump(exclude_unset=True)
    # inStock is not nullable on a record; an explicit null leaves it alone
    if fields.get("in_stock", False) is None:
        del fields["in_stock"]
    return fields
