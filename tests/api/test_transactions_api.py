from datetime import datetime, time, timedelta

from app.core.config import settings
from app.utils.dates import first_day

BASE = f"{settings.API_V1_PREFIX}/transactions"


def payload(**overrides):
    body = {
        "title": "Coffee",
        "type": "withdraw",
        "amount": 4.5,
        "categoryId": 1,
        "paidOrReceivedAt": datetime.now().isoformat(),
    }
    body.update(overrides)
    return body


async def create(client, **overrides):
    response = await client.post(BASE, json=payload(**overrides))
    assert response.status_code == 201
    return response.json()["data"]


class TestTransactionsApi:
    """Tests for the /transactions endpoints."""

    async def test_create_withdraw_stores_negative_amount(self, client):
        response = await client.post(BASE, json=payload(amount=50))

        assert response.status_code == 201
        body = response.json()
        assert body["data"]["amount"] <= 0
        assert body["data"]["amount"] == -50.0
        assert body["data"]["type"] == "withdraw"
        assert "createdAt" in body["data"]
        assert response.headers["location"] == f"{BASE}/{body['data']['id']}"

    async def test_create_deposit(self, client):
        data = await create(client, type="deposit", amount=100)

        assert data["amount"] == 100.0

    async def test_create_with_unknown_type_is_bad_request(self, client):
        response = await client.post(BASE, json=payload(type="transfer"))

        assert response.status_code == 400
        assert response.json()["code"] == 400

    async def test_create_without_date_is_bad_request(self, client):
        body = payload()
        del body["paidOrReceivedAt"]

        response = await client.post(BASE, json=body)

        assert response.status_code == 400
        assert "paidOrReceivedAt" in response.json()["message"]

    async def test_get_by_id(self, client):
        created = await create(client)

        response = await client.get(f"{BASE}/{created['id']}")

        assert response.status_code == 200
        assert response.json()["data"]["title"] == "Coffee"

    async def test_update_transaction(self, client):
        created = await create(client, type="deposit", amount=10)

        response = await client.put(
            f"{BASE}/{created['id']}", json=payload(title="Snacks", type="withdraw", amount=12.25)
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] == created["id"]
        assert data["title"] == "Snacks"
        assert data["amount"] == -12.25

    async def test_delete_not_found(self, client):
        response = await client.delete(f"{BASE}/9999")

        assert response.status_code == 404
        assert response.json()["message"] == "Transaction not found"

    async def test_delete_transaction(self, client):
        created = await create(client)

        response = await client.delete(f"{BASE}/{created['id']}")

        assert response.status_code == 200
        assert (await client.get(f"{BASE}/{created['id']}")).status_code == 404

    async def test_list_by_period_defaults_to_current_month(self, client):
        month_start = datetime.combine(first_day(datetime.now()), time(9, 0))
        await create(client, title="This month", paidOrReceivedAt=month_start.isoformat())
        await create(
            client,
            title="Last month",
            paidOrReceivedAt=(month_start - timedelta(days=1)).isoformat(),
        )

        response = await client.get(BASE)

        assert response.status_code == 200
        body = response.json()
        assert [t["title"] for t in body["data"]] == ["This month"]
        assert body["totalCount"] == 1

    async def test_list_by_explicit_period(self, client):
        await create(client, title="January", paidOrReceivedAt="2024-01-15T10:00:00")
        await create(client, title="February", paidOrReceivedAt="2024-02-15T10:00:00")

        response = await client.get(
            BASE, params={"startDate": "2024-01-01T00:00:00", "endDate": "2024-01-31T23:59:59"}
        )

        assert [t["title"] for t in response.json()["data"]] == ["January"]

    async def test_list_all_second_page(self, client):
        start = datetime(2024, 1, 1, 8, 0)
        for i in range(12):
            await create(client, title=f"Tx {i:02d}", paidOrReceivedAt=(start + timedelta(days=i)).isoformat())

        response = await client.get(f"{BASE}/all", params={"pageNumber": 2, "pageSize": 10})

        assert response.status_code == 200
        body = response.json()
        assert [t["title"] for t in body["data"]] == ["Tx 10", "Tx 11"]
        assert body["totalCount"] == 12

    async def test_list_with_invalid_date_is_bad_request(self, client):
        response = await client.get(BASE, params={"startDate": "not-a-date"})

        assert response.status_code == 400

    async def test_list_rejects_page_offset_past_bigint(self, client):
        for path in (BASE, f"{BASE}/all"):
            response = await client.get(path, params={"pageNumber": 10**18, "pageSize": 100})

            assert response.status_code == 400
            assert response.json()["code"] == 400

    async def test_id_past_bigint_is_bad_request(self, client):
        too_big = 2**63

        for response in (
            await client.get(f"{BASE}/{too_big}"),
            await client.delete(f"{BASE}/{too_big}"),
            await client.put(f"{BASE}/{too_big}", json=payload()),
        ):
            assert response.status_code == 400
            assert response.json()["code"] == 400

    async def test_category_id_past_bigint_is_bad_request(self, client):
        response = await client.post(BASE, json=payload(categoryId=2**63))

        assert response.status_code == 400
