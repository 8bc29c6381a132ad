import httpx
import pytest
from fastapi.testclient import TestClient

from docpricing.main import create_app


@pytest.fixture
def api_client(fake_supabase, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    from docpricing.db import supabase as supabase_module

    monkeypatch.setattr(supabase_module, "get_supabase_client", lambda: fake_supabase)
    return TestClient(create_app())


def _order_payload(**delivery_form) -> dict:
    return {
        "user_id": "user-1",
        "customer_name": "Awa Koné",
        "customer_phone": "+2250700000000",
        "order": {
            "document_type": "extrait_acte_naissance",
            "copies": 1,
            "city": "Abidjan",
            "service_type": "mairie",
            "delivery_form": delivery_form,
        },
    }


def test_health(api_client: TestClient):
    assert api_client.get("/api/health").json() == {"status": "ok"}

    database = api_client.get("/api/health/database").json()
    assert database["connected"] is True
    assert database["tariff_configured"] is True


def test_express_quote_for_sector(api_client: TestClient):
    response = api_client.post("/api/pricing/express", json={"origin_commune": "Yopougon", "sector_id": "s-1"})

    assert response.status_code == 200
    body = response.json()
    assert body["available"] is True
    assert body["price"] % 100 == 0
    assert 1000 <= body["price"] <= 5000
    assert body["road_distance_km"] >= body["distance_km"]


def test_express_quote_without_tariff_is_unavailable(api_client: TestClient, fake_supabase):
    fake_supabase.tables["delivery_pricing_config"] = []

    response = api_client.post("/api/pricing/pickup-to-depot", json={"origin_commune": "Cocody"})

    assert response.status_code == 200
    assert response.json() == {"available": False, "price": None, "distance_km": None, "road_distance_km": None}


def test_express_quote_requires_exactly_one_origin(api_client: TestClient):
    response = api_client.post(
        "/api/pricing/express",
        json={"origin_commune": "Cocody", "origin": {"latitude": 5.3, "longitude": -4.0}, "sector_id": "s-1"},
    )

    assert response.status_code == 422


def test_express_quote_unknown_sector(api_client: TestClient):
    response = api_client.post("/api/pricing/express", json={"origin_commune": "Cocody", "sector_id": "nope"})

    assert response.status_code == 404


def test_express_quote_with_broken_tariff(api_client: TestClient, fake_supabase):
    fake_supabase.tables["delivery_pricing_config"][0]["min_price"] = 9000

    response = api_client.post("/api/pricing/express", json={"origin_commune": "Cocody", "sector_id": "s-1"})

    assert response.status_code == 422


def test_preview_against_draft_tariff(api_client: TestClient):
    point = {"latitude": 5.32, "longitude": -4.017}
    tariff = {"base_fee": 500, "per_km_rate": 100, "road_factor": 1.3, "rounding": 100, "min_price": 1000, "max_price": 5000}

    response = api_client.post("/api/pricing/preview", json={"origin": point, "destination": point, "tariff": tariff})
    assert response.json()["price"] == 1000

    tariff["rounding"] = 0
    response = api_client.post("/api/pricing/preview", json={"origin": point, "destination": point, "tariff": tariff})
    assert response.status_code == 422


def test_sector_listing(api_client: TestClient):
    communes = api_client.get("/api/sectors/communes").json()
    assert [entry["commune"] for entry in communes] == ["Abobo", "Cocody"]

    sectors = api_client.get("/api/sectors/cocody").json()
    assert [sector["slug"] for sector in sectors] == ["angre", "riviera-2"]

    zones = api_client.get("/api/sectors/zones").json()
    assert [zone["code"] for zone in zones] == ["EST", "NORD"]

    availability = api_client.get("/api/sectors/Cocody/availability").json()
    assert availability == {"commune": "Cocody", "express_available": True, "capital_commune": True}


def test_sector_read_failure_is_503(api_client: TestClient, fake_supabase):
    fake_supabase.failures["delivery_sectors"] = httpx.ConnectError("network down")

    assert api_client.get("/api/sectors/communes").status_code == 503


def test_document_catalog_and_price(api_client: TestClient):
    documents = api_client.get("/api/documents").json()
    assert len(documents) == 8

    response = api_client.get(
        "/api/documents/extrait_acte_naissance/price",
        params={"city": "Daloa", "service_type": "sous_prefecture"},
    )
    assert response.json()["unit_price"] == 3000

    assert api_client.get("/api/documents/passeport/price", params={"city": "Daloa"}).status_code == 422


def test_billing_capture(api_client: TestClient):
    payload = _order_payload(ville_destination="Abidjan", moyen_recuperation="moi_meme_service_mairie")["order"]

    response = api_client.post("/api/billing/capture", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["total_amount"] == 2500
    assert body["prestation"]["description"] == "Prestation (récupération directe)"
    assert "shipping" not in body
    assert "express_delivery" not in body


def test_billing_capture_auto_quote_unavailable(api_client: TestClient, fake_supabase):
    fake_supabase.tables["delivery_pricing_config"] = []
    payload = _order_payload(ville_destination="Bouaké", moyen_recuperation="moi_meme_gare")["order"]
    payload["auto_quote"] = True

    assert api_client.post("/api/billing/capture", json=payload).status_code == 409


def test_order_roundtrip(api_client: TestClient):
    created = api_client.post(
        "/api/orders",
        json=_order_payload(ville_destination="Bouaké", moyen_recuperation="moi_meme_gare", moyen_expedition="utb"),
    )

    assert created.status_code == 201
    order = created.json()
    assert order["amount"] == 1500 + 2000 + 1000 + 2000

    billing = api_client.get(f"/api/orders/{order['reference']}/billing")
    assert billing.status_code == 200
    assert billing.json() == order["billing_details"]


def test_unknown_order_is_404(api_client: TestClient):
    assert api_client.get("/api/orders/IV-20250101-ZZZZ/billing").status_code == 404
