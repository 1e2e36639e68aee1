# documents.py
"""
GraphQL documents for the Zonos Graph client.

Contains every query and mutation sent to the Graph, grouped per schema.
Kept apart from the request logic so the selections can be reviewed and
changed without touching code.
"""

CART_FRAGMENT = """
fragment CartFragment on Cart {
  id
  organizationId
  createdAt
  expiresAt
  adjustments {
    amount
    currencyCode
    description
    productId
    sku
    type
  }
  items {
    id
    amount
    name
    currencyCode
    description
    imageUrl
    quantity
    sku
    countryOfOrigin
    provinceOfOrigin
    measurements {
      source
      type
      unitOfMeasure
      value
    }
    productId
    restriction {
      reason
      action
    }
    attributes {
      key
      value
    }
    metadata {
      key
      value
    }
  }
  metadata {
    key
    value
  }
}
"""

CART_BY_ID = (
    """
query cartById($id: ID!) {
  cart(id: $id) {
    ...CartFragment
  }
}
"""
    + CART_FRAGMENT
)

CART_UPSERT = (
    """
mutation cartUpsert($input: CartUpsertInput!) {
  cartUpsert(input: $input) {
    ...CartFragment
  }
}
"""
    + CART_FRAGMENT
)

CATALOG_ITEM = """
query catalogItem($id: ID, $productId: String, $sku: String) {
  catalogItem(id: $id, productId: $productId, sku: $sku) {
    id
    productId
    sku
    name
    description
    amount
    currencyCode
    countryOfOrigin
    hsCode
    categories
    createdAt
    updatedAt
  }
}
"""

CLASSIFICATIONS_CALCULATE = """
mutation classificationsCalculate($inputs: [ClassificationCalculateInput!]!) {
  classificationsCalculate(input: $inputs) {
    id
    name
    confidenceScore
    hsCode {
      code
      description {
        friendly
        full
      }
    }
    alternates {
      hsCode {
        code
      }
      probability
    }
  }
}
"""

LANDED_COST_FRAGMENT = """
fragment LandedCostFragment on LandedCost {
  id
  amountSubtotals {
    duties
    taxes
    fees
    landedCostTotal
    items
    shipping
  }
  currencyCode
  duties {
    amount
    currency
    description
    item {
      id
    }
  }
  taxes {
    amount
    currency
    description
    item {
      id
    }
  }
  fees {
    amount
    currency
    description
  }
  landedCostGuarantee
  method
  tariffRate
  createdAt
}
"""

FULL_LANDED_COST = (
    """
mutation fullLandedCost(
  $partyCreateWorkflowInput: [PartyCreateWorkflowInput!]!
  $itemCreateWorkflowInput: [ItemCreateWorkflowInput!]!
  $landedCostCalculateWorkflowInput: LandedCostWorkFlowInput!
) {
  partyCreateWorkflow(input: $partyCreateWorkflowInput) {
    id
    type
  }
  itemCreateWorkflow(input: $itemCreateWorkflowInput) {
    id
    amount
    quantity
  }
  cartonizeWorkflow {
    id
    type
    length
    width
    height
    weight
  }
  shipmentRatingCalculateWorkflow {
    id
    amount
    currencyCode
    displayName
    serviceLevelCode
  }
  landedCostCalculateWorkflow(input: $landedCostCalculateWorkflowInput) {
    ...LandedCostFragment
  }
}
"""
    + LANDED_COST_FRAGMENT
)

LANDED_COST_ONLY = (
    """
mutation landedCostOnly(
  $partyCreateWorkflowInput: [PartyCreateWorkflowInput!]!
  $itemCreateWorkflowInput: [ItemCreateWorkflowInput!]!
  $shipmentRatingCreateWorkflowInput: ShipmentRatingCreateWorkflowInput!
  $landedCostCalculateWorkflowInput: LandedCostWorkFlowInput!
) {
  partyCreateWorkflow(input: $partyCreateWorkflowInput) {
    id
    type
  }
  itemCreateWorkflow(input: $itemCreateWorkflowInput) {
    id
    amount
    quantity
  }
  cartonizeWorkflow {
    id
    type
  }
  shipmentRatingCreateWorkflow(input: $shipmentRatingCreateWorkflowInput) {
    id
    amount
    currencyCode
    displayName
    serviceLevelCode
  }
  landedCostCalculateWorkflow(input: $landedCostCalculateWorkflowInput) {
    ...LandedCostFragment
  }
}
"""
    + LANDED_COST_FRAGMENT
)

ORDER_CREATE = """
mutation orderCreate($input: OrderCreateInput!) {
  orderCreate(input: $input) {
    id
    accountOrderNumber
    currencyCode
    grandTotal
    status
    createdAt
    updatedAt
    metadata {
      key
      value
    }
    references {
      key
      value
    }
    zonosOrderId
  }
}
"""

GET_CREDENTIAL_SERVICE_TOKEN = """
query getCredentialServiceToken($input: CredentialServiceTokenInput!) {
  getCredentialServiceToken(input: $input) {
    token
    mode
    storeId
    expiresAt
  }
}
"""


CUSTOMER_GRAPH_DOCUMENTS = {
    "cartById": CART_BY_ID,
    "cartUpsert": CART_UPSERT,
    "catalogItem": CATALOG_ITEM,
    "classificationsCalculate": CLASSIFICATIONS_CALCULATE,
    "fullLandedCost": FULL_LANDED_COST,
    "landedCostOnly": LANDED_COST_ONLY,
    "orderCreate": ORDER_CREATE,
}

AUTH_DOCUMENTS = {
    "getCredentialServiceToken": GET_CREDENTIAL_SERVICE_TOKEN,
}
