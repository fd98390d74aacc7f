"""Tests for STR performance entry, history and the summary view."""

import uuid
from decimal import Decimal

import pytest
from conftest import performance_payload
from httpx import AsyncClient

from revportal.models.hotel import Hotel
from revportal.models.user import User

pytestmark = pytest.mark.asyncio(loop_scope="session")


def _url(hotel: Hotel, suffix: str = "") -> str:
    return f"/api/v1/hotels/{hotel.id}/performance{suffix}"


# ---------------------------------------------------------------------------
# POST /api/v1/hotels/{id}/performance
# ---------------------------------------------------------------------------


class TestCreatePerformance:
    async def test_derives_revpar_and_indices(
        self, client: AsyncClient, editor_headers: dict, editor_user: User, hotel: Hotel
    ) -> None:
        response = await client.post(_url(hotel), json=performance_payload(), headers=editor_headers)
        assert response.status_code == 201
        data = response.json()
        assert Decimal(data["revpar_actual"]) == Decimal("200.00")
        assert Decimal(data["revpar_budget"]) == Decimal("187.20")
        assert Decimal(data["revpar_prior_year"]) == Decimal("172.50")
        assert Decimal(data["revpar_comp_set"]) == Decimal("176.40")
        assert Decimal(data["mpi"]) == Decimal("111.11")
        assert Decimal(data["ari"]) == Decimal("102.04")
        assert Decimal(data["rgi"]) == Decimal("113.38")
        assert data["updated_by"] == str(editor_user.id)
        assert data["hotel_id"] == str(hotel.id)

    async def test_eighty_percent_at_two_hundred(self, client: AsyncClient, editor_headers: dict, hotel: Hotel) -> None:
        body = performance_payload(occupancy_actual=80, adr_actual=200)
        response = await client.post(_url(hotel), json=body, headers=editor_headers)
        assert Decimal(response.json()["revpar_actual"]) == Decimal("160.00")

    async def test_comp_set_defaults_to_actual(self, client: AsyncClient, editor_headers: dict, hotel: Hotel) -> None:
        body = performance_payload()
        del body["occupancy_comp_set"], body["adr_comp_set"]
        response = await client.post(_url(hotel), json=body, headers=editor_headers)
        assert response.status_code == 201
        data = response.json()
        assert Decimal(data["occupancy_comp_set"]) == Decimal("80")
        assert Decimal(data["adr_comp_set"]) == Decimal("250")
        assert Decimal(data["mpi"]) == Decimal("100.00")
        assert Decimal(data["ari"]) == Decimal("100.00")
        assert Decimal(data["rgi"]) == Decimal("100.00")

    async def test_zero_comp_set_occupancy_rejected(
        self, client: AsyncClient, editor_headers: dict, hotel: Hotel
    ) -> None:
        body = performance_payload(occupancy_comp_set=0)
        response = await client.post(_url(hotel), json=body, headers=editor_headers)
        assert response.status_code == 422
        assert response.json()["detail"] == "Cannot compute MPI: occupancy_comp_set is 0"

        listed = await client.get(_url(hotel), headers=editor_headers)
        assert listed.json() == []

    async def test_zero_occupancy_gives_zero_revpar(
        self, client: AsyncClient, editor_headers: dict, hotel: Hotel
    ) -> None:
        response = await client.post(
            _url(hotel), json=performance_payload(occupancy_actual=0, adr_actual=500), headers=editor_headers
        )
        assert response.status_code == 201
        assert Decimal(response.json()["revpar_actual"]) == Decimal("0.00")

    @pytest.mark.parametrize(
        "override",
        [
            {"occupancy_actual": 101},
            {"adr_budget": -1},
            {"adr_actual": "abc"},
            {"period_type": "daily"},
            {"period_start": "2025-03-09", "period_end": "2025-03-02"},
        ],
    )
    async def test_invalid_payloads(self, client: AsyncClient, editor_headers: dict, hotel: Hotel, override) -> None:
        response = await client.post(_url(hotel), json=performance_payload(**override), headers=editor_headers)
        assert response.status_code == 422

    async def test_huge_adr_rejected(self, client: AsyncClient, editor_headers: dict, hotel: Hotel) -> None:
        response = await client.post(_url(hotel), json=performance_payload(adr_actual="1e30"), headers=editor_headers)
        assert response.status_code == 422

    async def test_adr_at_column_maximum(self, client: AsyncClient, editor_headers: dict, hotel: Hotel) -> None:
        body = performance_payload(
            occupancy_actual=100, occupancy_comp_set=100, adr_actual="99999999.99", adr_comp_set="99999999.99"
        )
        response = await client.post(_url(hotel), json=body, headers=editor_headers)
        assert response.status_code == 201
        assert Decimal(response.json()["revpar_actual"]) == Decimal("99999999.99")

    async def test_index_too_large_to_store(self, client: AsyncClient, editor_headers: dict, hotel: Hotel) -> None:
        body = performance_payload(occupancy_actual=60, occupancy_comp_set="0.5")
        response = await client.post(_url(hotel), json=body, headers=editor_headers)
        assert response.status_code == 422
        assert response.json()["detail"].startswith("mpi: exceeds the storable maximum of 9999.99")

        listed = await client.get(_url(hotel), headers=editor_headers)
        assert listed.json() == []

    async def test_missing_field(self, client: AsyncClient, editor_headers: dict, hotel: Hotel) -> None:
        body = performance_payload()
        del body["adr_prior_year"]
        response = await client.post(_url(hotel), json=body, headers=editor_headers)
        assert response.status_code == 422

    async def test_viewer_forbidden(self, client: AsyncClient, viewer_headers: dict, hotel: Hotel) -> None:
        response = await client.post(_url(hotel), json=performance_payload(), headers=viewer_headers)
        assert response.status_code == 403

    async def test_editor_cannot_write_unassigned_hotel(
        self, client: AsyncClient, editor_headers: dict, other_hotel: Hotel
    ) -> None:
        response = await client.post(_url(other_hotel), json=performance_payload(), headers=editor_headers)
        assert response.status_code == 404

    async def test_unknown_hotel(self, client: AsyncClient, admin_headers: dict) -> None:
        response = await client.post(
            f"/api/v1/hotels/{uuid.uuid4()}/performance", json=performance_payload(), headers=admin_headers
        )
        assert response.status_code == 404


# ---------------------------------------------------------------------------
# GET /api/v1/hotels/{id}/performance
# ---------------------------------------------------------------------------


class TestListPerformance:
    async def test_newest_first_and_filtered_by_type(
        self, client: AsyncClient, editor_headers: dict, hotel: Hotel
    ) -> None:
        for start, end in (("2025-03-02", "2025-03-08"), ("2025-03-16", "2025-03-22"), ("2025-03-09", "2025-03-15")):
            await client.post(
                _url(hotel), json=performance_payload(period_start=start, period_end=end), headers=editor_headers
            )
        await client.post(
            _url(hotel),
            json=performance_payload(period_type="monthly", period_start="2025-02-01", period_end="2025-02-28"),
            headers=editor_headers,
        )

        weekly = await client.get(_url(hotel), headers=editor_headers)
        assert [r["period_start"] for r in weekly.json()] == ["2025-03-16", "2025-03-09", "2025-03-02"]

        monthly = await client.get(_url(hotel, "?period_type=monthly"), headers=editor_headers)
        assert [r["period_type"] for r in monthly.json()] == ["monthly"]

    async def test_limit(self, client: AsyncClient, editor_headers: dict, hotel: Hotel) -> None:
        for start, end in (("2025-03-02", "2025-03-08"), ("2025-03-09", "2025-03-15")):
            await client.post(
                _url(hotel), json=performance_payload(period_start=start, period_end=end), headers=editor_headers
            )
        response = await client.get(_url(hotel, "?limit=1"), headers=editor_headers)
        assert [r["period_start"] for r in response.json()] == ["2025-03-09"]

    async def test_overlapping_periods_allowed(self, client: AsyncClient, editor_headers: dict, hotel: Hotel) -> None:
        first = await client.post(_url(hotel), json=performance_payload(), headers=editor_headers)
        second = await client.post(_url(hotel), json=performance_payload(), headers=editor_headers)
        assert first.status_code == second.status_code == 201
        assert len((await client.get(_url(hotel), headers=editor_headers)).json()) == 2

    async def test_viewer_can_read(self, client: AsyncClient, viewer_headers: dict, hotel: Hotel) -> None:
        response = await client.get(_url(hotel), headers=viewer_headers)
        assert response.status_code == 200

    async def test_invisible_hotel(self, client: AsyncClient, viewer_headers: dict, other_hotel: Hotel) -> None:
        response = await client.get(_url(other_hotel), headers=viewer_headers)
        assert response.status_code == 404


# ---------------------------------------------------------------------------
# GET /api/v1/hotels/{id}/performance/summary
# ---------------------------------------------------------------------------


class TestPerformanceSummary:
    async def test_empty_summary(self, client: AsyncClient, viewer_headers: dict, hotel: Hotel) -> None:
        response = await client.get(_url(hotel, "/summary"), headers=viewer_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["hotel_id"] == str(hotel.id)
        assert data["latest"] is None
        assert data["rgi"] is None

    async def test_variances_and_bands(
        self, client: AsyncClient, editor_headers: dict, viewer_headers: dict, hotel: Hotel
    ) -> None:
        await client.post(_url(hotel), json=performance_payload(), headers=editor_headers)
        later = performance_payload(
            period_start="2025-03-09",
            period_end="2025-03-15",
            occupancy_comp_set=82,
            adr_comp_set=250,
        )
        await client.post(_url(hotel), json=later, headers=editor_headers)

        response = await client.get(_url(hotel, "/summary"), headers=viewer_headers)
        data = response.json()
        assert data["latest"]["period_start"] == "2025-03-09"

        assert Decimal(data["occupancy"]["vs_budget"]) == Decimal("2.56")
        assert Decimal(data["occupancy"]["vs_prior_year"]) == Decimal("6.67")
        assert Decimal(data["revpar"]["vs_budget"]) == Decimal("6.84")
        assert Decimal(data["revpar"]["vs_prior_year"]) == Decimal("15.94")

        # MPI 80/82 = 97.56, ARI 250/250 = 100.00, RGI 200/205 = 97.56
        assert data["mpi"]["band"] == "near"
        assert data["ari"]["band"] == "above"
        assert Decimal(data["rgi"]["value"]) == Decimal("97.56")
        assert data["rgi"]["band"] == "near"
