import httpx
import pytest

from faniko.main import app
from faniko_bot.api_client import FanikoApiError, FanikoClient


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def api():
    return FanikoClient("http://faniko.test", transport=httpx.ASGITransport(app=app))


@pytest.mark.anyio
async def test_signup_login_and_apply(api):
    user = await api.signup("jane@example.com", "jane", "secret123")
    assert user["role"] == "fan"

    await api.apply_creator("Jane Doe", "jane", "jane@example.com", "subscription", price=9.99)

    logged_in = await api.login(" JANE@example.com ", "secret123")
    assert logged_in["role"] == "creator"

    creator = await api.get_creator("jane")
    assert creator["price"] == 9.99


@pytest.mark.anyio
async def test_api_errors_carry_server_message(api):
    with pytest.raises(FanikoApiError) as err:
        await api.get_creator("ghost")

    assert err.value.status_code == 404
    assert err.value.message == "Creator not found"


@pytest.mark.anyio
async def test_fan_money_flow(api):
    await api.apply_creator("Jane", "jane", "jane@example.com", "subscription", price=10)
    created = await api.create_post("jane", "Secret", "ppv", price=3)
    post_id = created["post"]["id"]

    await api.tip("jane", 5, fan_username="fan1", message="love it")
    unlocked = await api.unlock("jane", post_id, fan_username="fan1")
    again = await api.unlock("jane", post_id, fan_username="fan1")
    subscribed = await api.subscribe("jane", fan_username="fan1")
    liked = await api.like("jane", post_id, "fan1")

    assert unlocked["transaction"]["amount"] == 3
    assert again["alreadyUnlocked"] is True
    assert subscribed["subscription"]["status"] == "active"
    assert liked["likedByMe"] is True
    assert await api.unlocked_post_ids("jane", "fan1") == [post_id]
    assert (await api.subscription_status("jane", "fan1"))["subscribed"] is True

    earnings = await api.earnings("jane")
    assert earnings["totals"] == {"tips": 5, "ppv": 3, "subscriptions": 10, "allTime": 18}


@pytest.mark.anyio
async def test_update_creator_and_delete_post(api):
    await api.apply_creator("Jane", "jane", "jane@example.com", "free")
    created = await api.create_post("jane", "Hello", "free")

    updated = await api.update_creator("jane", accountType="subscription", price=7)
    await api.delete_post("jane", created["post"]["id"])

    assert updated["creator"]["price"] == 7
    assert await api.list_posts("jane") == []


@pytest.mark.anyio
async def test_update_post_and_subscribers(api):
    await api.apply_creator("Jane", "jane", "jane@example.com", "subscription", price=10)
    created = await api.create_post("jane", "Hello", "free")
    await api.subscribe("jane", fan_username="fan1")

    updated = await api.update_post("jane", created["post"]["id"], visibility="ppv", price=4, title=None)
    subs = await api.subscribers("jane")

    assert updated["post"]["title"] == "Hello"
    assert updated["post"]["visibility"] == "ppv"
    assert updated["post"]["price"] == 4
    assert [s["fanUsername"] for s in subs] == ["fan1"]


@pytest.mark.anyio
async def test_unreachable_api():
    def refuse(request):
        raise httpx.ConnectError("refused", request=request)

    api = FanikoClient("http://faniko.test", transport=httpx.MockTransport(refuse))

    with pytest.raises(FanikoApiError) as err:
        await api.list_creators()

    assert err.value.status_code == 0
