from typing import List

from pydantic import BaseModel, ConfigDict, Field


class CartCreate(BaseModel):
    # client-supplied "id" and unknown fields are ignored
    # strict: "999", 999.0 and true are not ints
    model_config = ConfigDict(populate_by_name=True, extra="ignore", strict=True)

    customer_id: int = Field(alias="customerId")
    product_ids: List[int] = Field(default_factory=list, alias="productIds")


class Cart(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int
    customer_id: int = Field(alias="customerId")
    product_ids: List[int] = Field(default_factory=list, alias="productIds")
