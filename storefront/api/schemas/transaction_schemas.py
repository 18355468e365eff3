from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from storefront.api.schemas.user_schemas import LoginRequest
from storefront.utils.validation import parse_product_id


class PurchaseRequest(LoginRequest):
    model_config = ConfigDict(populate_by_name=True)

    product_id: Optional[int] = Field(default=None, alias="productID", description="Product to buy")

    @field_validator("product_id", mode="before")
    @classmethod
    def _product_id(cls, value: Any) -> Optional[int]:
        # Unparseable or out-of-range ids resolve to "no such product"
        return parse_product_id(value)


class TransactionIdResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    transaction_id: int = Field(alias="transactionID")
