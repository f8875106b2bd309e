"""
HTTP surface tests against create_app() with an injected storefront.
"""
from unittest.mock import patch

from conftest import ScriptedChatProvider
from lumina.prompts.shopping_prompts import APOLOGY_MESSAGE


def _login_admin(client):
    response = client.post(
        "/auth/login",
        json={"mode": "sign-in", "email": "admin@lumina.com", "password": "123456"},
    )
    assert response.status_code == 200
    return response.json()


def test_health_and_request_id(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert response.headers["X-Request-Id"]


def test_incoming_request_id_is_echoed(client):
    response = client.get("/health", headers={"X-Request-Id": "abc123"})
    assert response.headers["X-Request-Id"] == "abc123"


# ── Pages ─────────────────────────────────────────────────────────────────────

def test_home_page_lists_products(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "베이직 오버핏 코튼 셔츠" in response.text
    assert "LOGIN" in response.text


def test_home_page_applies_filter(client):
    response = client.get("/", params={"category": "전자제품", "q": "pro"})
    assert "노이즈 캔슬링 헤드폰 Pro" in response.text
    assert "베이직 오버핏 코튼 셔츠" not in response.text


def test_home_page_renders_admin_dashboard_for_admin(client):
    _login_admin(client)
    response = client.get("/")
    assert response.status_code == 200
    assert "Administrator" in response.text
    assert "LOGIN" not in response.text


# ── Catalog / cart ────────────────────────────────────────────────────────────

def test_list_products_with_filter(client):
    body = client.get("/api/products", params={"category": "홈/리빙"}).json()
    assert body["count"] == 2
    assert [p["id"] for p in body["products"]] == [4, 8]


def test_unknown_product_is_404(client):
    assert client.get("/api/products/404").status_code == 404


def test_cart_flow(client):
    client.post("/api/cart/items", json={"product_id": 1})
    body = client.post("/api/cart/items", json={"product_id": 1}).json()
    assert body["lines"][0]["quantity"] == 2
    assert body["is_open"] is True

    body = client.patch("/api/cart/items/1", json={"delta": -5}).json()
    assert body["lines"][0]["quantity"] == 1

    client.post("/api/cart/items", json={"product_id": 2})
    body = client.get("/api/cart").json()
    assert body["total"] == 45000 + 289000
    assert body["item_count"] == 2

    body = client.delete("/api/cart/items/1").json()
    assert [line["id"] for line in body["lines"]] == [2]


def test_add_unknown_product_to_cart_is_404(client):
    assert client.post("/api/cart/items", json={"product_id": 404}).status_code == 404


# ── Auth ──────────────────────────────────────────────────────────────────────

def test_login_validation_error_is_400_with_message(client):
    response = client.post(
        "/auth/login",
        json={"mode": "sign-in", "email": "a@b.com", "password": "123"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "비밀번호는 6자 이상이어야 합니다."
    assert client.get("/auth/session").json()["authenticated"] is False


def test_admin_login_switches_view(client):
    body = _login_admin(client)
    assert body["is_admin"] is True
    assert body["view_mode"] == "admin"
    assert body["user"]["role"] == "administrator"


def test_logout_needs_confirmation(client):
    _login_admin(client)
    assert client.post("/auth/logout", json={"confirm": False}).json()["logged_out"] is False
    body = client.post("/auth/logout", json={"confirm": True}).json()
    assert body["logged_out"] is True
    assert body["authenticated"] is False
    assert body["view_mode"] == "store"


# ── Admin ─────────────────────────────────────────────────────────────────────

def test_admin_routes_are_forbidden_for_customers(client):
    client.post(
        "/auth/login",
        json={"mode": "sign-in", "email": "jiwoo@example.com", "password": "secret1"},
    )
    assert client.put("/api/view-mode", json={"mode": "admin"}).status_code == 403
    assert client.get("/admin/products/new").status_code == 403
    response = client.post("/admin/products", json={"id": 1000, "name": "x", "price": 1})
    assert response.status_code == 403
    assert client.get("/api/products/1000").status_code == 404


def test_admin_create_update_delete(client):
    _login_admin(client)

    draft = client.get("/admin/products/new").json()
    draft.update(name="린넨 와이드 팬츠", price=59000, tags=["바지"])
    body = client.post("/admin/products", json=draft).json()
    assert body["created"] is True
    assert client.get("/api/products").json()["products"][0]["id"] == draft["id"]

    edit = client.get(f"/admin/products/{draft['id']}/edit").json()
    edit["price"] = 49000
    body = client.post("/admin/products", json=edit).json()
    assert body["created"] is False
    assert client.get(f"/api/products/{draft['id']}").json()["price"] == 49000

    assert client.delete(f"/admin/products/{draft['id']}").json()["deleted"] is False
    assert client.delete(f"/admin/products/{draft['id']}", params={"confirm": True}).json()["deleted"] is True
    assert client.get(f"/api/products/{draft['id']}").status_code == 404


def test_admin_submit_without_price_is_400(client):
    _login_admin(client)
    response = client.post("/admin/products", json={"id": 1000, "name": "가격 없음"})
    assert response.status_code == 400
    assert response.json()["detail"] == "상품명과 가격을 입력해주세요."


def test_admin_submit_with_all_category_is_400(client):
    _login_admin(client)
    response = client.post(
        "/admin/products",
        json={"id": 5000, "name": "전체 상품", "price": 10, "category": "전체"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "카테고리를 선택해주세요."
    assert client.get("/api/products/5000").status_code == 404


def test_edit_unknown_product_is_404(client):
    _login_admin(client)
    assert client.get("/admin/products/404/edit").status_code == 404


# ── Chat ──────────────────────────────────────────────────────────────────────

def test_chat_reply_is_streamed(client):
    response = client.post("/api/chat/messages", json={"text": "셔츠 추천해줘"})
    assert response.status_code == 200
    assert response.text == "안녕하세요"

    body = client.get("/api/chat/messages").json()
    assert body["busy"] is False
    assert [m["role"] for m in body["messages"]] == ["assistant", "user", "assistant"]
    assert body["messages"][-1]["text"] == "안녕하세요"
    assert body["messages"][-1]["streaming"] is False


def test_chat_failure_appends_apology(client, scripted_provider: ScriptedChatProvider):
    scripted_provider.fail_on_open = True
    response = client.post("/api/chat/messages", json={"text": "hi"})
    assert response.status_code == 200
    assert response.text == ""
    messages = client.get("/api/chat/messages").json()["messages"]
    assert messages[-1]["text"] == APOLOGY_MESSAGE


def test_chat_rejects_empty_message(client):
    assert client.post("/api/chat/messages", json={"text": "  "}).status_code == 400


def test_chat_busy_session_is_409(client, storefront):
    with patch.object(storefront.chat, "start", return_value=None) as start:
        response = client.post("/api/chat/messages", json={"text": "hi"})
    assert response.status_code == 409
    start.assert_called_once()


def test_chat_toggle(client):
    assert client.post("/api/chat/toggle").json() == {"is_open": True}
    assert client.post("/api/chat/toggle").json() == {"is_open": False}
    assert client.post("/api/chat/cancel").json() == {"cancelled": False}
