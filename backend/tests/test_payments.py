import pytest


# -------------------------------------------------
# TIPS
# -------------------------------------------------
def test_tip_records_transaction(client, make_creator):
    make_creator()

    resp = client.post(
        "/api/creators/jane/tips",
        json={"amount": "5", "message": "x" * 600, "fanUsername": "fan1", "fanEmail": "fan@example.com", "postId": "2"},
    )

    assert resp.status_code == 200
    txn = resp.json()["transaction"]
    assert resp.json()["success"] is True
    assert txn["id"] == 1
    assert txn["type"] == "tip"
    assert txn["creatorUsername"] == "jane"
    assert txn["fanUsername"] == "fan1"
    assert txn["fanEmail"] == "fan@example.com"
    assert txn["amount"] == 5
    assert txn["currency"] == "USD"
    assert txn["postId"] == 2
    assert len(txn["message"]) == 500


def test_tip_keeps_post_id_and_message_as_sent(client, make_creator):
    make_creator()

    txn = client.post(
        "/api/creators/jane/tips",
        json={"amount": 1, "postId": "2.7", "message": "  thanks!  "},
    ).json()["transaction"]

    assert txn["postId"] == 2.7
    assert txn["message"] == "  thanks!  "


def test_anonymous_tip(client, make_creator):
    make_creator()

    txn = client.post("/api/creators/jane/tips", json={"amount": 2.5}).json()["transaction"]

    assert txn["fanUsername"] == "anonymous"
    assert txn["fanEmail"] is None
    assert txn["postId"] is None
    assert txn["amount"] == 2.5


@pytest.mark.parametrize("amount", [None, "", "abc", 0, -3, "0"])
def test_tip_rejects_bad_amounts(client, make_creator, amount):
    make_creator()

    resp = client.post("/api/creators/jane/tips", json={"amount": amount})

    assert resp.status_code == 400
    assert resp.json() == {"error": "Please provide a valid tip amount."}


def test_tip_unknown_creator(client):
    resp = client.post("/api/creators/ghost/tips", json={"amount": 5})

    assert resp.status_code == 404


# -------------------------------------------------
# PPV UNLOCK
# -------------------------------------------------
def test_unlock_charges_once_per_fan(client, make_creator, make_post):
    make_creator()
    post = make_post(visibility="ppv", price="4.99")
    url = f"/api/creators/jane/posts/{post['id']}/unlock"

    first = client.post(url, json={"fanUsername": "fan1", "fanEmail": "fan@example.com"}).json()
    again = client.post(url, json={"fanUsername": "FAN1"}).json()

    assert first["success"] is True
    assert first["unlockedPostId"] == post["id"]
    assert first["transaction"]["type"] == "ppv_unlock"
    assert first["transaction"]["amount"] == 4.99
    assert first["transaction"]["postId"] == post["id"]

    assert again == {"success": True, "alreadyUnlocked": True, "unlockedPostId": post["id"]}

    earnings = client.get("/api/creators/jane/earnings").json()
    assert len(earnings["transactions"]) == 1


def test_anonymous_unlocks_are_each_charged(client, make_creator, make_post):
    make_creator()
    post = make_post(visibility="ppv", price="3")
    url = f"/api/creators/jane/posts/{post['id']}/unlock"

    client.post(url, json={})
    second = client.post(url).json()

    assert "alreadyUnlocked" not in second
    assert client.get("/api/creators/jane/earnings").json()["totals"]["ppv"] == 6


@pytest.mark.parametrize("visibility, price", [("free", None), ("ppv", "0")])
def test_unlock_requires_paid_ppv(client, make_creator, make_post, visibility, price):
    make_creator()
    post = make_post(visibility=visibility, price=price)

    resp = client.post(f"/api/creators/jane/posts/{post['id']}/unlock", json={"fanUsername": "fan1"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "This post is not a paid PPV post."}


def test_unlock_unknown_post(client, make_creator):
    make_creator()

    resp = client.post("/api/creators/jane/posts/99/unlock", json={"fanUsername": "fan1"})

    assert resp.status_code == 404
    assert resp.json() == {"error": "Post not found"}


def test_unlocks_listing(client, make_creator, make_post):
    make_creator()
    a = make_post(visibility="ppv", price="1")
    make_post(visibility="ppv", price="2")
    c = make_post(visibility="ppv", price="3")
    for post in (a, c):
        client.post(f"/api/creators/jane/posts/{post['id']}/unlock", json={"fanUsername": "fan1"})

    mine = client.get("/api/creators/Jane/unlocks", params={"fanUsername": "fan1"}).json()
    guest = client.get("/api/creators/jane/unlocks").json()

    assert mine == {"creator": "jane", "fanUsername": "fan1", "postIds": [a["id"], c["id"]]}
    assert guest["postIds"] == []


# -------------------------------------------------
# SUBSCRIPTIONS
# -------------------------------------------------
def test_subscribe_creates_subscription_and_transaction(client, make_creator):
    make_creator(price="9.99")

    resp = client.post("/api/creators/jane/subscribe", json={"fanUsername": "fan1", "fanEmail": "fan@example.com"})

    body = resp.json()
    assert body["success"] is True
    assert body["subscription"]["id"] == 1
    assert body["subscription"]["status"] == "active"
    assert body["subscription"]["price"] == 9.99
    assert body["subscription"]["fanUsername"] == "fan1"
    assert body["transaction"]["type"] == "subscription"
    assert body["transaction"]["amount"] == 9.99
    assert body["transaction"]["postId"] is None


def test_subscribe_twice_returns_existing(client, make_creator):
    make_creator()
    first = client.post("/api/creators/jane/subscribe", json={"fanUsername": "fan1"}).json()

    again = client.post("/api/creators/jane/subscribe", json={"fanUsername": "fan1"}).json()

    assert again == {
        "success": True,
        "alreadySubscribed": True,
        "subscription": first["subscription"],
    }
    assert len(client.get("/api/creators/jane/earnings").json()["transactions"]) == 1


def test_subscribe_to_free_creator(client, make_creator):
    make_creator(account_type="free", price=None)

    resp = client.post("/api/creators/jane/subscribe", json={"fanUsername": "fan1"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "This creator does not have a subscription plan."}


def test_subscribe_without_price(client, make_creator):
    make_creator(account_type="subscription", price="0")

    resp = client.post("/api/creators/jane/subscribe", json={"fanUsername": "fan1"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "This creator's subscription price is not configured."}


def test_subscription_status_and_subscribers(client, make_creator):
    make_creator()
    client.post("/api/creators/jane/subscribe", json={"fanUsername": "fan1"})
    client.post("/api/creators/jane/subscribe", json={"fanUsername": "fan2"})

    status = client.get("/api/creators/jane/subscription", params={"fanUsername": "FAN1"}).json()
    nobody = client.get("/api/creators/jane/subscription", params={"fanUsername": "fan3"}).json()
    subs = client.get("/api/creators/jane/subscribers").json()

    assert status["subscribed"] is True
    assert status["subscription"]["fanUsername"] == "fan1"
    assert nobody == {"subscribed": False, "subscription": None}
    assert [s["fanUsername"] for s in subs] == ["fan1", "fan2"]
