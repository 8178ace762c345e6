"""Dish/variant stock toggle and direct restock tests."""

from datetime import datetime, timedelta, timezone
from pathlib import Path

from fastapi.testclient import TestClient
from sqlalchemy import select

from restoman.core.config import Settings
from restoman.main import create_app
from restoman.models import Dish, StockHistory, Variant


def _build_app(tmp_path: Path):
    return create_app(
        Settings(
            database_url=f"sqlite:///{tmp_path / 'stock.db'}",
            admin_username="admin",
            admin_password="admin123",
        )
    )


def _seed_menu(app) -> tuple[int, int]:
    with app.state.db.session_factory() as db:
        dish = Dish(dish_name="Masala Dosa")
        db.add(dish)
        db.flush()
        variant = Variant(variant_name="Family pack", dish_id=dish.id)
        db.add(variant)
        db.commit()
        return dish.id, variant.id


def _auth(client: TestClient) -> dict[str, str]:
    token = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"}).json()["token"]
    return {"Authorization": f"Bearer {token}"}


def test_mark_dish_out_of_stock_then_auto_restock(tmp_path: Path) -> None:
    """Dish marked out of stock should come back after its restock time."""
    app = _build_app(tmp_path)
    with TestClient(app) as client:
        dish_id, _ = _seed_menu(app)
        headers = _auth(client)
        restock_at = (datetime.now(timezone.utc) - timedelta(minutes=5)).isoformat()
        marked = client.put(
            f"/api/menu/dishes/{dish_id}/stock",
            json={"isOutOfStock": True, "restockTime": restock_at, "reason": "Batter ran out"},
            headers=headers,
        )
        restocked = client.get("/api/stock/restock")

    assert marked.status_code == 200
    assert marked.json()["message"] == "Dish marked as out of stock successfully"
    assert marked.json()["data"]["isOutOfStock"] is True
    assert marked.json()["data"]["outOfStockReason"] == "Batter ran out"
    assert marked.json()["data"]["lastStockUpdateBy"] is not None

    assert restocked.status_code == 200
    assert restocked.json() == {
        "success": True,
        "message": "Auto-restock check completed",
        "results": {"dishes": 1, "variants": 0},
    }

    with app.state.db.session_factory() as db:
        dish = db.get(Dish, dish_id)
        assert dish is not None
        assert dish.is_out_of_stock is False
        actions = db.scalars(select(StockHistory.action).order_by(StockHistory.id)).all()
    assert actions == ["out_of_stock", "auto_restock"]


def test_manual_restock_clears_restock_time(tmp_path: Path) -> None:
    """Manual restock should clear the pending restock time."""
    app = _build_app(tmp_path)
    with TestClient(app) as client:
        _, variant_id = _seed_menu(app)
        headers = _auth(client)
        client.put(
            f"/api/menu/variants/{variant_id}/stock",
            json={"isOutOfStock": True, "restockTime": "2030-01-01T10:00:00+00:00", "autoRestock": False},
            headers=headers,
        )
        response = client.put(
            f"/api/menu/variants/{variant_id}/stock",
            json={"isOutOfStock": False},
            headers=headers,
        )

    assert response.status_code == 200
    assert response.json()["message"] == "Variant marked as in stock successfully"
    data = response.json()["data"]
    assert data["isOutOfStock"] is False
    assert data["restockTime"] is None
    assert data["autoRestock"] is False


def test_stock_toggle_unknown_item(tmp_path: Path) -> None:
    """Stock toggles on unknown items should return 404."""
    with TestClient(_build_app(tmp_path)) as client:
        headers = _auth(client)
        dish = client.put("/api/menu/dishes/404/stock", json={"isOutOfStock": True}, headers=headers)
        variant = client.put("/api/menu/variants/404/stock", json={"isOutOfStock": True}, headers=headers)

    assert dish.status_code == 404
    assert dish.json() == {"success": False, "message": "Dish not found"}
    assert variant.status_code == 404
    assert variant.json() == {"success": False, "message": "Variant not found"}


def test_stock_toggle_requires_flag(tmp_path: Path) -> None:
    """Stock toggle without isOutOfStock should be a bad request."""
    app = _build_app(tmp_path)
    with TestClient(app) as client:
        dish_id, _ = _seed_menu(app)
        response = client.put(f"/api/menu/dishes/{dish_id}/stock", json={}, headers=_auth(client))

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_direct_restock_reports_server_error(tmp_path: Path, monkeypatch) -> None:
    """Direct restock failures should return a generic 500."""
    from restoman.api.endpoints import stock

    def _broken(db):
        raise RuntimeError("lost connection")

    with TestClient(_build_app(tmp_path)) as client:
        monkeypatch.setattr(stock, "restock_due_items", _broken)
        response = client.get("/api/stock/restock")

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Server error during auto-restock"}
