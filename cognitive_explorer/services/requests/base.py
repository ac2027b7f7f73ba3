"""
Request descriptors for Cognitive Services REST operations.

A descriptor is inert data: it describes one HTTP call (method, path, query,
body) together with its estimated cost and the documentation page of the
operation. Descriptors are frozen and rebuilt whenever a form field changes.
"""

import json
from typing import Any, Optional
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field

JSON_CONTENT_TYPE = "application/json"


class ServiceCost(BaseModel):
    """Estimated list price of a call (standard tier, USD)."""
    model_config = ConfigDict(frozen=True)

    service: str
    transactions: int = Field(ge=0)
    unit: str
    price_per_thousand: float

    @property
    def estimated_cost(self) -> float:
        return self.transactions * self.price_per_thousand / 1000

    def __str__(self) -> str:
        return (
            f"{self.transactions} {self.unit}(s) ~ ${self.estimated_cost:.4f} "
            f"(${self.price_per_thousand:.2f} per 1000 {self.unit}s)"
        )


def face_api_transaction(count: int = 1) -> ServiceCost:
    """Face API S0 tier: $1 per 1000 transactions."""
    return ServiceCost(
        service="Face API",
        transactions=count,
        unit="transaction",
        price_per_thousand=1.0,
    )


def text_api_records(count: int = 1) -> ServiceCost:
    """Text Analytics S tier: $1 per 1000 text records."""
    return ServiceCost(
        service="Text API",
        transactions=count,
        unit="text record",
        price_per_thousand=1.0,
    )


class HttpRequest(BaseModel):
    """Description of one HTTP call to a Cognitive Service."""
    model_config = ConfigDict(frozen=True)

    http_method: str = "GET"
    content_type: Optional[str] = None
    relative_path: str
    queries: dict[str, str] = Field(default_factory=dict)
    headers: dict[str, str] = Field(default_factory=dict)
    body: Optional[str] = None
    cost: ServiceCost
    cognitive_service_doc: str = ""

    @property
    def path_and_query(self) -> str:
        """Relative path with the encoded query string, for display."""
        if not self.queries:
            return self.relative_path
        return f"{self.relative_path}?{urlencode(self.queries)}"


def serialize_body(**fields: Any) -> str:
    """
    Serializes request body fields to compact JSON, preserving their order.

    Fields whose value is None are omitted.
    """
    payload = {name: value for name, value in fields.items() if value is not None}
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
