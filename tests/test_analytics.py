"""Analytics service and API tests."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from spendwise.models.category import Category
from spendwise.services.analytics_service import AnalyticsService
from spendwise.stores.budget_store import BudgetStore
from spendwise.stores.transaction_store import TransactionStore

TODAY = date(2025, 6, 15)
USER = "default-user"


async def add(db, amount, category, on, user_id=USER, description="entry"):
    return await TransactionStore(db).insert(
        user_id=user_id,
        amount=Decimal(str(amount)),
        date=on,
        description=description,
        category=category,
    )


# ── Service ───────────────────────────────────────


@pytest.mark.asyncio
async def test_category_breakdown_worked_example(db):
    await add(db, 100, Category.FOOD, TODAY)
    await add(db, 50, Category.FOOD, TODAY)
    await add(db, 30, Category.TRANSPORT, TODAY)
    await add(db, 999, Category.FOOD, TODAY, user_id="someone-else")

    entries, total = await AnalyticsService(db).category_breakdown(USER)

    assert total == Decimal("180")
    assert [(e.category, e.total_amount, e.transaction_count, e.avg_amount, e.percentage) for e in entries] == [
        (Category.FOOD, Decimal("150"), 2, Decimal("75.00"), Decimal("83.33")),
        (Category.TRANSPORT, Decimal("30"), 1, Decimal("30.00"), Decimal("16.67")),
    ]


@pytest.mark.asyncio
async def test_category_breakdown_date_range_is_inclusive(db):
    await add(db, 10, Category.FOOD, date(2025, 5, 31))
    await add(db, 20, Category.FOOD, date(2025, 6, 1))
    await add(db, 40, Category.HOUSING, date(2025, 6, 30))
    await add(db, 80, Category.HOUSING, date(2025, 7, 1))

    entries, total = await AnalyticsService(db).category_breakdown(
        USER, date_from=date(2025, 6, 1), date_to=date(2025, 6, 30)
    )
    assert total == Decimal("60")
    assert {e.category: e.total_amount for e in entries} == {
        Category.HOUSING: Decimal("40"),
        Category.FOOD: Decimal("20"),
    }


@pytest.mark.asyncio
async def test_category_breakdown_without_transactions(db):
    entries, total = await AnalyticsService(db).category_breakdown(USER)
    assert entries == []
    assert total == Decimal("0")


@pytest.mark.asyncio
async def test_monthly_expenses_current_month_only(db):
    await add(db, 25, Category.FOOD, TODAY)
    await add(db, 5, Category.FOOD, date(2025, 6, 1))

    result = await AnalyticsService(db).monthly_expenses(USER, months_back=2, today=TODAY)

    assert len(result) == 1
    bucket = result[0]
    assert (bucket.year, bucket.month, bucket.month_name) == (2025, 6, "Jun")
    assert bucket.total_expenses == Decimal("30")
    assert bucket.transaction_count == 2


@pytest.mark.asyncio
async def test_monthly_expenses_range_and_order(db):
    await add(db, 1, Category.FOOD, date(2024, 12, 14))  # before the window
    await add(db, 2, Category.FOOD, date(2024, 12, 15))  # first day of the window
    await add(db, 3, Category.FOOD, date(2025, 2, 10))
    await add(db, 4, Category.FOOD, date(2025, 6, 16))  # after today

    result = await AnalyticsService(db).monthly_expenses(USER, months_back=6, today=TODAY)

    assert [(m.year, m.month, m.total_expenses) for m in result] == [
        (2024, 12, Decimal("2")),
        (2025, 2, Decimal("3")),
    ]


@pytest.mark.asyncio
async def test_dashboard_summary(db):
    await add(db, 100, Category.HOUSING, date(2025, 6, 1))
    await add(db, 40, Category.FOOD, date(2025, 6, 30))
    await add(db, 20, Category.FOOD, TODAY)
    for day in range(1, 5):
        await add(db, 1, Category.SHOPPING, date(2025, 5, day))
    await add(db, 500, Category.HOUSING, date(2025, 7, 1), description="future")

    budgets = BudgetStore(db)
    await budgets.upsert(USER, Category.FOOD, 6, 2025, Decimal("50"))
    await budgets.upsert(USER, Category.HOUSING, 6, 2025, Decimal("1000"))
    await budgets.upsert(USER, Category.HOUSING, 5, 2025, Decimal("7"))

    summary = await AnalyticsService(db).dashboard_summary(USER, today=TODAY)

    assert summary.total_expenses == Decimal("160")
    assert summary.transaction_count == 3
    assert summary.total_budget == Decimal("1050")
    assert summary.top_category.category == Category.HOUSING
    assert summary.top_category.amount == Decimal("100")
    assert [(t.category, t.amount) for t in summary.category_totals] == [
        (Category.HOUSING, Decimal("100")),
        (Category.FOOD, Decimal("60")),
    ]
    assert (summary.month, summary.year) == (6, 2025)

    # Latest five overall, regardless of month.
    recent_dates = [t.date for t in summary.recent_transactions]
    assert recent_dates == [date(2025, 7, 1), date(2025, 6, 30), TODAY, date(2025, 6, 1), date(2025, 5, 4)]


@pytest.mark.asyncio
async def test_dashboard_summary_empty(db):
    summary = await AnalyticsService(db).dashboard_summary(USER, today=TODAY)
    assert summary.total_expenses == Decimal("0")
    assert summary.transaction_count == 0
    assert summary.total_budget == Decimal("0")
    assert summary.top_category is None
    assert summary.recent_transactions == []
    assert summary.category_totals == []


@pytest.mark.asyncio
async def test_budget_insights(db):
    await add(db, 130, Category.FOOD, TODAY)
    await add(db, 80, Category.TRANSPORT, TODAY)
    await add(db, 999, Category.HOUSING, date(2025, 5, 31))

    budgets = BudgetStore(db)
    await budgets.upsert(USER, Category.FOOD, 6, 2025, Decimal("100"))
    await budgets.upsert(USER, Category.TRANSPORT, 6, 2025, Decimal("100"))
    await budgets.upsert(USER, Category.HOUSING, 6, 2025, Decimal("1000"))

    insights = await AnalyticsService(db).budget_insights(USER, today=TODAY)

    by_category = {i.category: i for i in insights}
    assert [i.category for i in insights] == [Category.FOOD, Category.HOUSING, Category.TRANSPORT]

    food = by_category[Category.FOOD]
    assert (food.difference, food.percentage, food.status) == (Decimal("30"), Decimal("130.00"), "over")

    transport = by_category[Category.TRANSPORT]
    assert transport.status == "good"  # exactly 80 % of the budget

    housing = by_category[Category.HOUSING]
    assert housing.actual == Decimal("0")
    assert housing.status == "under"


# ── API ───────────────────────────────────────────


async def post_transaction(client, amount, category, on, **extra):
    response = await client.post(
        "/api/v1/transactions",
        json={"amount": amount, "date": on.isoformat(), "description": "entry", "category": category, **extra},
    )
    assert response.status_code == 201, response.text


@pytest.mark.asyncio
async def test_category_breakdown_endpoint(client):
    today = date.today()
    await post_transaction(client, 100, "Food", today)
    await post_transaction(client, 50, "Food", today)
    await post_transaction(client, 30, "Transport", today)

    response = await client.get("/api/v1/analytics/category-breakdown")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["total"] == 180
    assert body["data"] == [
        {"category": "Food", "totalAmount": 150, "transactionCount": 2, "avgAmount": 75, "percentage": 83.33},
        {"category": "Transport", "totalAmount": 30, "transactionCount": 1, "avgAmount": 30, "percentage": 16.67},
    ]


@pytest.mark.asyncio
async def test_category_breakdown_endpoint_rejects_reversed_range(client):
    response = await client.get(
        "/api/v1/analytics/category-breakdown",
        params={"startDate": "2025-02-01", "endDate": "2025-01-01"},
    )
    assert response.status_code == 400
    assert response.json()["details"] == [
        {"field": "startDate", "message": "startDate must be on or before endDate"}
    ]


@pytest.mark.asyncio
async def test_monthly_expenses_endpoint(client):
    today = date.today()
    await post_transaction(client, 25, "Food", today)

    response = await client.get("/api/v1/analytics/monthly-expenses", params={"months": 2})
    assert response.status_code == 200
    data = response.json()["data"]
    assert len(data) == 1
    assert data[0]["year"] == today.year
    assert data[0]["month"] == today.month
    assert data[0]["totalExpenses"] == 25
    assert data[0]["transactionCount"] == 1
    assert data[0]["monthName"]

    assert (await client.get("/api/v1/analytics/monthly-expenses", params={"months": 0})).status_code == 400


@pytest.mark.asyncio
async def test_dashboard_endpoint(client):
    today = date.today()
    await post_transaction(client, 70, "Housing", today)
    await post_transaction(client, 5, "Food", today - timedelta(days=400))
    await client.post("/api/v1/budgets", json={"category": "Housing", "amount": 100})

    response = await client.get("/api/v1/analytics/dashboard")
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["totalExpenses"] == 70
    assert data["transactionCount"] == 1
    assert data["totalBudget"] == 100
    assert data["topCategory"] == {"category": "Housing", "amount": 70}
    assert data["categoryTotals"] == [{"category": "Housing", "amount": 70}]
    assert len(data["recentTransactions"]) == 2
    assert (data["month"], data["year"]) == (today.month, today.year)


@pytest.mark.asyncio
async def test_dashboard_endpoint_without_data_reports_null_top_category(client):
    data = (await client.get("/api/v1/analytics/dashboard", params={"userId": "nobody"})).json()["data"]
    assert data["topCategory"] is None
    assert data["recentTransactions"] == []


@pytest.mark.asyncio
async def test_insights_endpoint(client):
    today = date.today()
    await post_transaction(client, 130, "Food", today)
    await client.post("/api/v1/budgets", json={"category": "Food", "amount": 100})

    response = await client.get("/api/v1/analytics/insights")
    assert response.status_code == 200
    assert response.json()["data"] == [
        {"category": "Food", "budget": 100, "actual": 130, "difference": 30, "percentage": 130, "status": "over"}
    ]
