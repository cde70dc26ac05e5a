"""Tests for buildings, units and tenants."""

from conftest import (
    OTHER_OWNER_ID,
    make_building,
    make_unit,
    make_tenant,
    make_bill,
)


class TestBuildingEndpoints:

    def test_create_and_get_building(self, client) -> None:
        building = make_building(client)
        assert building["name"] == "Sunrise Apartments"
        assert "id" in building
        assert "created_at" in building

        make_unit(client, building["id"], unit_number="101")
        r = client.get(f"/buildings/{building['id']}")
        assert r.status_code == 200
        assert [u["unit_number"] for u in r.json()["units"]] == ["101"]

    def test_building_requires_name_and_address(self, client) -> None:
        assert client.post("/buildings", json={"name": "", "address": "x"}).status_code == 422
        assert client.post("/buildings", json={"name": "x"}).status_code == 422

    def test_update_building(self, client) -> None:
        building = make_building(client)
        r = client.put(
            f"/buildings/{building['id']}",
            json={"name": "Sunset Residences", "address": "99 Rizal Ave"},
        )
        assert r.status_code == 200
        assert r.json()["name"] == "Sunset Residences"
        assert client.get("/buildings").json()[0]["address"] == "99 Rizal Ave"

    def test_get_building_not_found(self, client) -> None:
        assert client.get("/buildings/99999").status_code == 404

    def test_delete_building_cascades(self, client) -> None:
        building = make_building(client)
        unit = make_unit(client, building["id"])
        tenant = make_tenant(client, unit["id"])
        make_bill(client, tenant["id"])

        assert client.delete(f"/buildings/{building['id']}").status_code == 204
        assert client.get("/buildings").json() == []
        assert client.get("/units").json() == []
        assert client.get("/tenants").json() == []
        assert client.get("/bills").json() == []


class TestUnitEndpoints:

    def test_list_units_by_building(self, client) -> None:
        a = make_building(client, name="A")
        b = make_building(client, name="B")
        make_unit(client, a["id"], unit_number="2")
        make_unit(client, a["id"], unit_number="1")
        make_unit(client, b["id"], unit_number="9")

        units = client.get("/units", params={"building_id": a["id"]}).json()
        assert [u["unit_number"] for u in units] == ["1", "2"]
        assert units[0]["building_name"] == "A"
        assert len(client.get("/units").json()) == 3

    def test_unit_validation(self, client) -> None:
        building = make_building(client)
        base = {"building_id": building["id"], "unit_number": "1", "rent_amount": 100, "status": "vacant"}
        assert client.post("/units", json={**base, "rent_amount": -1}).status_code == 422
        assert client.post("/units", json={**base, "unit_number": ""}).status_code == 422
        assert client.post("/units", json={**base, "status": "reserved"}).status_code == 422
        r = client.post("/units", json={**base, "floor": ""})
        assert r.status_code == 201
        assert r.json()["floor"] is None

    def test_unit_in_unknown_building(self, client) -> None:
        r = client.post("/units", json={"building_id": "nope", "unit_number": "1"})
        assert r.status_code == 404

    def test_update_unit(self, client) -> None:
        building = make_building(client)
        unit = make_unit(client, building["id"])
        r = client.put(
            f"/units/{unit['id']}",
            json={"unit_number": "101A", "floor": 2, "rent_amount": 5500, "status": "vacant"},
        )
        assert r.status_code == 200
        assert r.json()["unit_number"] == "101A"
        assert r.json()["building_id"] == building["id"]

    def test_delete_unit_cascades(self, client) -> None:
        building = make_building(client)
        unit = make_unit(client, building["id"])
        tenant = make_tenant(client, unit["id"])
        make_bill(client, tenant["id"])

        assert client.delete(f"/units/{unit['id']}").status_code == 204
        assert client.get(f"/tenants/{tenant['id']}").status_code == 404
        assert client.get("/bills").json() == []


class TestTenantEndpoints:

    def test_create_tenant_occupies_unit(self, client) -> None:
        building = make_building(client)
        unit = make_unit(client, building["id"])
        assert unit["status"] == "vacant"

        tenant = make_tenant(client, unit["id"])
        assert tenant["unit_number"] == "101"
        assert tenant["building_name"] == "Sunrise Apartments"
        assert tenant["building_address"] == "12 Mabini St"
        detail = client.get(f"/tenants/{tenant['id']}").json()
        assert detail["building_address"] == "12 Mabini St"
        assert client.get(f"/units/{unit['id']}").json()["status"] == "occupied"

    def test_delete_tenant_vacates_unit(self, client) -> None:
        building = make_building(client)
        unit = make_unit(client, building["id"])
        tenant = make_tenant(client, unit["id"])

        assert client.delete(f"/tenants/{tenant['id']}").status_code == 204
        assert client.get(f"/units/{unit['id']}").json()["status"] == "vacant"
        assert client.get(f"/tenants/{tenant['id']}").status_code == 404

    def test_tenant_in_unknown_unit_changes_nothing(self, client) -> None:
        r = client.post(
            "/tenants",
            json={"unit_id": "nope", "name": "Ana", "move_in_date": "2026-01-01"},
        )
        assert r.status_code == 404
        assert client.get("/tenants").json() == []

    def test_optional_text_blank_is_null(self, client) -> None:
        building = make_building(client)
        unit = make_unit(client, building["id"])
        tenant = make_tenant(client, unit["id"], phone="", email="", move_out_date="")
        assert tenant["phone"] is None
        assert tenant["email"] is None
        assert tenant["move_out_date"] is None

    def test_tenant_validation(self, client) -> None:
        building = make_building(client)
        unit = make_unit(client, building["id"])
        base = {"unit_id": unit["id"], "name": "Ana", "move_in_date": "2026-01-01"}
        assert client.post("/tenants", json={**base, "email": "not-an-email"}).status_code == 422
        assert client.post("/tenants", json={**base, "name": ""}).status_code == 422
        assert client.post("/tenants", json={k: v for k, v in base.items() if k != "move_in_date"}).status_code == 422
        assert client.post("/tenants", json={**base, "status": "evicted"}).status_code == 422

    def test_update_tenant(self, client) -> None:
        building = make_building(client)
        unit = make_unit(client, building["id"])
        tenant = make_tenant(client, unit["id"])
        r = client.put(
            f"/tenants/{tenant['id']}",
            json={
                "unit_id": unit["id"],
                "name": "Juan D. Cruz",
                "move_in_date": "2026-01-01",
                "move_out_date": "2026-06-30",
                "status": "inactive",
            },
        )
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "inactive"
        assert data["move_out_date"] == "2026-06-30"
        assert data["phone"] is None

    def test_list_tenants_filters(self, client) -> None:
        a = make_building(client, name="A")
        b = make_building(client, name="B")
        ua = make_unit(client, a["id"])
        ub = make_unit(client, b["id"])
        make_tenant(client, ua["id"], name="Zed")
        make_tenant(client, ub["id"], name="Amy", status="inactive")

        assert [t["name"] for t in client.get("/tenants").json()] == ["Amy", "Zed"]
        assert [t["name"] for t in client.get("/tenants", params={"status": "active"}).json()] == ["Zed"]
        assert [t["name"] for t in client.get("/tenants", params={"building_id": b["id"]}).json()] == ["Amy"]
        assert client.get("/tenants", params={"status": "gone"}).status_code == 422


class TestOwnerScoping:

    def test_other_owner_sees_nothing(self, client, as_owner) -> None:
        building = make_building(client)
        unit = make_unit(client, building["id"])
        tenant = make_tenant(client, unit["id"])
        bill = make_bill(client, tenant["id"])

        as_owner(OTHER_OWNER_ID)
        assert client.get("/buildings").json() == []
        assert client.get(f"/buildings/{building['id']}").status_code == 404
        assert client.get(f"/bills/{bill['id']}").status_code == 404
        assert client.delete(f"/units/{unit['id']}").status_code == 404
        assert client.patch(f"/bills/{bill['id']}/status", json={"paid": True}).status_code == 404
        r = client.post("/units", json={"building_id": building["id"], "unit_number": "X"})
        assert r.status_code == 404

        dashboard = client.get("/dashboard", params={"year": 2026}).json()
        assert dashboard["overdue_bills"] == []
        assert dashboard["occupied"] == 0
