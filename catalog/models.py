# catalog/models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Union, Dict, Any

class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: Optional[str] = None
    price: Union[int, float]
    category: Optional[str] = None
    in_stock: bool = Field(True, alias="inStock")

    def to_dict(self) -> Dict[str, Any]:
        # unset optional fields are left out of the JSON record
        return self.model_dump(by_alias=True, exclude_none=True)
