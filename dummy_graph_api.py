# file: dummy_graph_api.py
"""
Local stand-in for the Zonos Graph.

Answers POST /api/graphql/<schema>/<operation> with seeded fake results so the
client and CLI can be exercised without credentials. Requests without a
credentialToken header get the Graph's 401 payload.

Usage:
    python dummy_graph_api.py
    python main.py cartById --variables '{"id": "cart_abc"}' --header credentialToken=test
"""

import random
import uuid
from datetime import datetime, timedelta, timezone

from faker import Faker
from faker_commerce import Provider as CommerceProvider
from flask import Flask, jsonify, request

import config

app = Flask(__name__)
fake = Faker("en_US")
fake.add_provider(CommerceProvider)
Faker.seed(42)  # Reproducible data
random.seed(42)

ORGANIZATION_ID = "organization_6454c8b7-4409-40b5-a56f-5af63190c42c"
UNAUTHORIZED = "HTTP Status 401 - Full authentication is required to access this resource"


def _timestamps() -> tuple[str, str]:
    created = datetime.now(timezone.utc)
    expires = created + timedelta(minutes=1)
    return (
        created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        expires.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    )


def generate_item(source: dict | None = None) -> dict:
    """Build a cart item, filling gaps in the submitted input with fake values."""
    source = source or {}
    name = source.get("name") or fake.ecommerce_name()
    return {
        "id": f"item_{uuid.uuid4().hex[:13]}",
        "amount": source.get("amount", round(random.uniform(1.99, 99.99), 2)),
        "attributes": None,
        "countryOfOrigin": source.get("countryOfOrigin"),
        "currencyCode": source.get("currencyCode", "USD"),
        "description": source.get("description", name),
        "imageUrl": source.get("imageUrl"),
        "measurements": [],
        "metadata": source.get("metadata"),
        "name": name,
        "productId": source.get("productId", ""),
        "provinceOfOrigin": source.get("provinceOfOrigin"),
        "quantity": source.get("quantity", random.randint(1, 3)),
        "restriction": None,
        "sku": source.get("sku", ""),
    }


def generate_cart(cart_id: str | None = None, cart_input: dict | None = None) -> dict:
    """Build a cart. Without input, items are random."""
    cart_input = cart_input or {}
    created_at, expires_at = _timestamps()
    if "items" in cart_input:
        items = [generate_item(i) for i in cart_input["items"]]
    else:
        items = [generate_item() for _ in range(random.randint(1, 3))]
    adjustments = [
        {
            "amount": a.get("amount"),
            "currencyCode": a.get("currencyCode", "USD"),
            "description": a.get("description"),
            "productId": a.get("productId"),
            "sku": a.get("sku"),
            "type": a.get("type"),
        }
        for a in cart_input.get("adjustments", [])
    ]
    return {
        "adjustments": adjustments,
        "createdAt": created_at,
        "expiresAt": expires_at,
        "id": cart_id or f"cart_{uuid.uuid4()}",
        "items": items,
        "metadata": [],
        "organizationId": ORGANIZATION_ID,
    }


def cart_by_id(variables: dict) -> dict:
    return {"cart": generate_cart(variables.get("id"))}


def cart_upsert(variables: dict) -> dict:
    cart_input = variables.get("input") or {}
    return {"cartUpsert": generate_cart(cart_input.get("id"), cart_input)}


def catalog_item(variables: dict) -> dict:
    created_at, _ = _timestamps()
    name = fake.ecommerce_name()
    return {
        "catalogItem": {
            "id": variables.get("id") or f"catalog_item_{uuid.uuid4()}",
            "productId": variables.get("productId") or str(uuid.uuid4()),
            "sku": variables.get("sku") or fake.bothify("SKU-####-??").upper(),
            "name": name,
            "description": name,
            "amount": round(random.uniform(1.99, 99.99), 2),
            "currencyCode": "USD",
            "countryOfOrigin": fake.country_code(),
            "hsCode": fake.numerify("####.##"),
            "categories": [fake.ecommerce_category()],
            "createdAt": created_at,
            "updatedAt": created_at,
        }
    }


def classifications_calculate(variables: dict) -> dict:
    results = []
    for item in variables.get("inputs") or []:
        code = fake.numerify("####.##.####")
        results.append(
            {
                "id": f"classification_{uuid.uuid4()}",
                "name": item.get("name"),
                "confidenceScore": round(random.uniform(0.5, 1.0), 2),
                "hsCode": {
                    "code": code,
                    "description": {"friendly": item.get("name"), "full": item.get("description") or item.get("name")},
                },
                "alternates": [
                    {"hsCode": {"code": fake.numerify("####.##.####")}, "probability": round(random.uniform(0, 0.5), 2)}
                ],
            }
        )
    return {"classificationsCalculate": results}


def _landed_cost(variables: dict, items: list[dict], shipping: float) -> dict:
    settings = variables.get("landedCostCalculateWorkflowInput") or {}
    created_at, _ = _timestamps()
    subtotal = round(sum(i["amount"] * i["quantity"] for i in items), 2)
    duties = round(subtotal * 0.05, 2)
    taxes = round((subtotal + duties + shipping) * 0.2, 2)
    fees = 1.5
    return {
        "id": f"landed_cost_{uuid.uuid4()}",
        "amountSubtotals": {
            "duties": duties,
            "taxes": taxes,
            "fees": fees,
            "landedCostTotal": round(duties + taxes + fees, 2),
            "items": subtotal,
            "shipping": shipping,
        },
        "currencyCode": "USD",
        "duties": [{"amount": duties, "currency": "USD", "description": "Duty", "item": None}],
        "taxes": [{"amount": taxes, "currency": "USD", "description": "VAT", "item": None}],
        "fees": [{"amount": fees, "currency": "USD", "description": "Carrier fee"}],
        "landedCostGuarantee": "NOT_ENABLED",
        "method": settings.get("calculationMethod", "DDP"),
        "tariffRate": settings.get("tariffRate"),
        "createdAt": created_at,
    }


def _workflow(variables: dict) -> tuple[dict, list[dict]]:
    parties = [
        {"id": f"party_{uuid.uuid4()}", "type": p.get("type")}
        for p in variables.get("partyCreateWorkflowInput") or []
    ]
    items = [
        {"id": f"item_{uuid.uuid4()}", "amount": i.get("amount", 0), "quantity": i.get("quantity", 1)}
        for i in variables.get("itemCreateWorkflowInput") or []
    ]
    return {
        "partyCreateWorkflow": parties,
        "itemCreateWorkflow": items,
        "cartonizeWorkflow": [
            {"id": f"carton_{uuid.uuid4()}", "type": "PACKAGE", "length": 10, "width": 8, "height": 4, "weight": 2}
        ],
    }, items


def full_landed_cost(variables: dict) -> dict:
    data, items = _workflow(variables)
    rating = {
        "id": f"shipment_rating_{uuid.uuid4()}",
        "amount": 20.0,
        "currencyCode": "USD",
        "displayName": "Standard",
        "serviceLevelCode": "ups.standard",
    }
    data["shipmentRatingCalculateWorkflow"] = [rating]
    data["landedCostCalculateWorkflow"] = [_landed_cost(variables, items, rating["amount"])]
    return data


def landed_cost_only(variables: dict) -> dict:
    data, items = _workflow(variables)
    rating_input = variables.get("shipmentRatingCreateWorkflowInput") or {}
    rating = {
        "id": f"shipment_rating_{uuid.uuid4()}",
        "amount": rating_input.get("amount", 0),
        "currencyCode": rating_input.get("currencyCode", "USD"),
        "displayName": rating_input.get("displayName"),
        "serviceLevelCode": rating_input.get("serviceLevelCode"),
    }
    data["shipmentRatingCreateWorkflow"] = rating
    data["landedCostCalculateWorkflow"] = [_landed_cost(variables, items, rating["amount"])]
    return data


def order_create(variables: dict) -> dict:
    order_input = variables.get("input") or {}
    created_at, _ = _timestamps()
    return {
        "orderCreate": {
            "id": f"order_{uuid.uuid4()}",
            "accountOrderNumber": order_input.get("accountOrderNumber"),
            "currencyCode": order_input.get("currencyCode", "USD"),
            "grandTotal": round(random.uniform(10, 500), 2),
            "status": "OPEN",
            "createdAt": created_at,
            "updatedAt": created_at,
            "metadata": order_input.get("metadata") or [],
            "references": order_input.get("references") or [],
            "zonosOrderId": str(random.randint(100000, 999999)),
        }
    }


RESOLVERS = {
    ("zonos-customer-graph", "cartById"): cart_by_id,
    ("zonos-customer-graph", "cartUpsert"): cart_upsert,
    ("zonos-customer-graph", "catalogItem"): catalog_item,
    ("zonos-customer-graph", "classificationsCalculate"): classifications_calculate,
    ("zonos-customer-graph", "fullLandedCost"): full_landed_cost,
    ("zonos-customer-graph", "landedCostOnly"): landed_cost_only,
    ("zonos-customer-graph", "orderCreate"): order_create,
}


@app.route("/api/graphql/<schema>/<operation>", methods=["POST"])
def graphql(schema, operation):
    """
    Resolve a single operation. The operation is taken from the URL, the
    document itself is not parsed.
    """
    if not request.headers.get("credentialToken"):
        return jsonify({"data": None, "errors": [{"message": UNAUTHORIZED}]}), 401

    resolver = RESOLVERS.get((schema, operation))
    if resolver is None:
        message = f"Cannot query field '{operation}' on schema '{schema}'"
        return jsonify({"data": None, "errors": [{"message": message}]}), 400

    body = request.get_json(silent=True) or {}
    return jsonify({"data": resolver(body.get("variables") or {})})


if __name__ == "__main__":
    print(f"Serving fake Graph on port {config.DUMMY_API_PORT}")
    app.run(host="0.0.0.0", port=config.DUMMY_API_PORT, debug=True)
