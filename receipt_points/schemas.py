from pydantic import BaseModel, ConfigDict, Field
from typing import List

# Wire names are camelCase; absent fields decode to empty values and
# the scoring rules degrade on them instead of rejecting the receipt.
class Item(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_description: str = Field(default="", alias="shortDescription")
    price: str = ""

class Receipt(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    retailer: str = ""
    purchase_date: str = Field(default="", alias="purchaseDate")
    purchase_time: str = Field(default="", alias="purchaseTime")
    items: List[Item] = Field(default_factory=list)
    total: str = ""

class ProcessResponse(BaseModel):
    id: str

class PointsResponse(BaseModel):
    points: int
