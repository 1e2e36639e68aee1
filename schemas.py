# schemas.py
"""
Pydantic models for the Zonos Graph client.

Defines the response envelope, GraphQL errors, and the variables accepted by
each supported operation. Field names follow the Graph's camelCase so that a
dumped model is a valid GraphQL variables object.
"""

from typing import Any, Literal, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorLocation(BaseModel):
    """Position of an error inside a GraphQL document."""

    model_config = ConfigDict(extra="allow")

    line: Optional[int] = None
    column: Optional[int] = None


class GraphQLError(BaseModel):
    """Single error entry returned by the Graph."""

    model_config = ConfigDict(extra="allow")

    message: str = Field(description="Human readable error message")
    locations: Optional[list[ErrorLocation]] = None
    path: Optional[list[str | int]] = None
    extensions: Optional[dict[str, Any]] = None


class GQLResponse(NamedTuple):
    """
    Uniform result of every Graph call.

    `json` is the operation's raw result on success, otherwise None and
    `errors` describes what went wrong.
    """

    json: Optional[dict[str, Any]]
    errors: list[GraphQLError]

    @property
    def ok(self) -> bool:
        """True when the call produced no errors."""
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to plain JSON-compatible data.

        Returns:
            Dict with "json" and "errors" keys.
        """
        return {
            "json": self.json,
            "errors": [e.model_dump(exclude_unset=True) for e in self.errors],
        }


class GraphInput(BaseModel):
    """Base for Graph input types. Unknown schema fields are passed through."""

    model_config = ConfigDict(extra="allow")


# --- shared inputs ---


class MetadataInput(GraphInput):
    key: str
    value: str


# --- cart ---


CartAdjustmentType = Literal["CART_TOTAL", "ITEM", "SHIPPING"]


class CartAdjustmentInput(GraphInput):
    """Discount or surcharge applied to a cart."""

    amount: float = Field(description="Negative for discounts")
    currencyCode: str = Field(min_length=3, max_length=3)
    description: Optional[str] = None
    productId: Optional[str] = None
    sku: Optional[str] = None
    type: CartAdjustmentType


class CartItemInput(GraphInput):
    amount: float = Field(ge=0, description="Unit price")
    currencyCode: str = Field(min_length=3, max_length=3)
    quantity: int = Field(ge=1)
    name: Optional[str] = None
    description: Optional[str] = None
    imageUrl: Optional[str] = None
    productId: Optional[str] = None
    sku: Optional[str] = None
    countryOfOrigin: Optional[str] = None
    provinceOfOrigin: Optional[str] = None
    metadata: Optional[list[MetadataInput]] = None


class CartUpsertInput(GraphInput):
    """
    Full cart contents.

    `items` must list every item that should be in the cart after the call,
    not only the ones being added. Omit `id` to create a new cart.
    """

    id: Optional[str] = None
    items: list[CartItemInput] = Field(default_factory=list)
    adjustments: list[CartAdjustmentInput] = Field(default_factory=list)
    metadata: Optional[list[MetadataInput]] = None


class CartByIdQueryVariables(GraphInput):
    id: str


class CartUpsertMutationVariables(GraphInput):
    input: CartUpsertInput


# --- catalog ---


class CatalogItemQueryVariables(GraphInput):
    """Legacy catalog lookup. At least one identifier should be given."""

    id: Optional[str] = None
    productId: Optional[str] = None
    sku: Optional[str] = None


# --- classification ---


class ClassificationCalculateInput(GraphInput):
    name: str
    description: Optional[str] = None
    categories: Optional[list[str]] = None
    material: Optional[str] = None
    countryOfOrigin: Optional[str] = None
    imageUrl: Optional[str] = None
    productId: Optional[str] = None


class ClassificationsCalculateMutationVariables(GraphInput):
    inputs: list[ClassificationCalculateInput]


# --- landed cost workflows ---


PartyType = Literal["ORIGIN", "DESTINATION", "PAYOR"]


class PartyLocationInput(GraphInput):
    countryCode: str = Field(min_length=2, max_length=2)
    administrativeArea: Optional[str] = None
    administrativeAreaCode: Optional[str] = None
    line1: Optional[str] = None
    line2: Optional[str] = None
    locality: Optional[str] = None
    postalCode: Optional[str] = None


class PartyCreateWorkflowInput(GraphInput):
    location: PartyLocationInput
    type: PartyType


class ItemCreateWorkflowInput(GraphInput):
    amount: float = Field(ge=0)
    currencyCode: str = Field(min_length=3, max_length=3)
    quantity: int = Field(ge=1)
    countryOfOrigin: Optional[str] = None
    description: Optional[str] = None
    hsCode: Optional[str] = None
    productId: Optional[str] = None
    sku: Optional[str] = None


class LandedCostCalculateWorkflowInput(GraphInput):
    calculationMethod: Literal["DDP", "DDU", "DAP"] = "DDP"
    endUse: Literal["FOR_RESALE", "NOT_FOR_RESALE"] = "NOT_FOR_RESALE"
    tariffRate: Optional[str] = None


class ShipmentRatingCreateWorkflowInput(GraphInput):
    amount: float = Field(ge=0)
    currencyCode: str = Field(min_length=3, max_length=3)
    displayName: str
    serviceLevelCode: str


class FullLandedCostMutationVariables(GraphInput):
    partyCreateWorkflowInput: list[PartyCreateWorkflowInput]
    itemCreateWorkflowInput: list[ItemCreateWorkflowInput]
    landedCostCalculateWorkflowInput: LandedCostCalculateWorkflowInput


class LandedCostOnlyMutationVariables(FullLandedCostMutationVariables):
    shipmentRatingCreateWorkflowInput: ShipmentRatingCreateWorkflowInput


# --- orders ---


class OrderCreateInput(GraphInput):
    currencyCode: str = Field(min_length=3, max_length=3)
    landedCostId: str
    accountOrderNumber: Optional[str] = None
    metadata: Optional[list[MetadataInput]] = None
    references: Optional[list[MetadataInput]] = None


class OrderCreateMutationVariables(GraphInput):
    input: OrderCreateInput


# --- auth ---


class CredentialServiceTokenInput(GraphInput):
    mode: Literal["LIVE", "TEST"]
    storeId: int


class GetCredentialServiceTokenQueryVariables(GraphInput):
    input: CredentialServiceTokenInput
