# SPDX-License-Identifier: Apache-2.0
"""File: src/formandfunction/clients/stock.py
Project: Form & Function API
Description:
    Stock availability lookup against the merchant's public GraphQL endpoint.

    One POST per call, no retry, no batching: the lookup is advisory and
    best-effort. Any transport failure, non-2xx status or undecodable body is
    raised once as `StockLookupError` with the cause chained.

Status derivation
-----------------
- no branch availability records -> NotAvailable
- any branch with stockLevel > 0  -> InStock
- otherwise                       -> OutOfStock
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

import httpx
from httpx import HTTPStatusError, RequestError
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..exceptions import StockLookupError

logger = logging.getLogger(__name__)

OPERATION_NAME = "tpplcProductCollectionAvailability"
GRAPHQL_URL = f"https://www.travisperkins.co.uk/graphql?op={OPERATION_NAME}"
BRAND_ID = "tp"
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/58.0.3029.110 Safari/537.36"
)

AVAILABILITY_QUERY = """\
query tpplcProductCollectionAvailability($branchId: String, $branchLimit: Int, $postcode: String, $productId: String!, $withinRadius: Float, $brandId: ID!) {
  tpplcBrand(brandId: $brandId) {
    productCollectionAvailability(
      branchId: $branchId
      branchLimit: $branchLimit
      postcode: $postcode
      productId: $productId
      withinRadius: $withinRadius
    ) {
      branchId
      stockLevel
      stockUom
      __typename
    }
    __typename
  }
}"""


class StockStatus(str, Enum):
    IN_STOCK = "InStock"
    OUT_OF_STOCK = "OutOfStock"
    NOT_AVAILABLE = "NotAvailable"


# --- Response shape -----------------------------------------------------------
# Missing or null containers decode to empty, mirroring a lenient JSON decoder.

class BranchAvailability(BaseModel):
    branch_id: Optional[str] = Field(None, alias="branchId", strict=True)
    stock_level: Optional[float] = Field(None, alias="stockLevel", strict=True)


class BrandAvailability(BaseModel):
    availability: List[BranchAvailability] = Field(
        default_factory=list, alias="productCollectionAvailability"
    )

    @field_validator("availability", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class AvailabilityData(BaseModel):
    brand: Optional[BrandAvailability] = Field(None, alias="tpplcBrand")


class AvailabilityResponse(BaseModel):
    data: Optional[AvailabilityData] = None

    def branches(self) -> List[BranchAvailability]:
        if self.data is None or self.data.brand is None:
            return []
        return self.data.brand.availability


def derive_status(stock_levels: Iterable[float]) -> StockStatus:
    levels = list(stock_levels)
    if not levels:
        return StockStatus.NOT_AVAILABLE
    if any(level > 0 for level in levels):
        return StockStatus.IN_STOCK
    return StockStatus.OUT_OF_STOCK


def build_request_body(product_id: str, postcode: str) -> Dict[str, Any]:
    return {
        "operationName": OPERATION_NAME,
        "query": AVAILABILITY_QUERY,
        "variables": {
            "productId": product_id,
            "postcode": postcode,
            "brandId": BRAND_ID,
        },
    }


class StockLookupClient:
    """Async client for the availability query.

    The underlying `httpx.AsyncClient` is shared across calls; pass one in to
    control transport settings in tests. Call `aclose()` on shutdown.
    """

    def __init__(
        self,
        endpoint: str = GRAPHQL_URL,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.endpoint = endpoint
        self._http_client = http_client or httpx.AsyncClient()

    async def check_stock(self, product_id: str, postcode: str) -> StockStatus:
        logger.info(f"Stock lookup for product {product_id} at postcode {postcode}")
        headers = {"Content-Type": "application/json", "User-Agent": USER_AGENT}

        try:
            response = await self._http_client.post(
                self.endpoint, json=build_request_body(product_id, postcode), headers=headers
            )
            response.raise_for_status()
            decoded = AvailabilityResponse.model_validate(response.json())
        except HTTPStatusError as e:
            logger.error(
                f"Stock endpoint returned HTTP {e.response.status_code} "
                f"for product {product_id}"
            )
            raise StockLookupError(
                f"graphql api request failed with status: {e.response.status_code}"
            ) from e
        except RequestError as e:
            logger.error(f"Network error during stock lookup: {e!r}")
            raise StockLookupError(f"failed to send request to graphql api: {e!r}") from e
        except (ValueError, ValidationError) as e:
            # json.JSONDecodeError is a ValueError
            logger.error(f"Undecodable stock response: {e}")
            raise StockLookupError(f"failed to decode graphql response: {e}") from e

        status = derive_status(branch.stock_level or 0.0 for branch in decoded.branches())
        logger.info(f"Stock status for product {product_id}: {status.value}")
        return status

    async def aclose(self) -> None:
        await self._http_client.aclose()
