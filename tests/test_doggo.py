import httpx
import pytest

from godfishbot.cache import RemoteUrl
from godfishbot.handlers.api import ApiError
from godfishbot.handlers.doggo import (
    Doggo,
    DoggoError,
    DoggoState,
    breed_path,
    fetch_breeds,
    get_doggo_handlers,
    query_api,
)

from conftest import make_context, make_update

BREEDS = ["bulldog", "boston bulldog", "french bulldog", "pug"]
PUG_URL = "https://images.dog.ceo/breeds/pug/n02110958_1.jpg"


def client_for(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def dog_api(request):
    path = request.url.path
    if path == "/api/breeds/list/all":
        return httpx.Response(
            200,
            json={"status": "success", "message": {"bulldog": ["boston", "french"], "pug": []}},
        )
    if path in ("/api/breeds/image/random", "/api/breed/pug/images/random"):
        return httpx.Response(200, json={"status": "success", "message": PUG_URL})
    return httpx.Response(
        404,
        json={"status": "error", "message": "Breed not found (master breed does not exist)", "code": 404},
    )


def test_breed_path():
    assert breed_path("pug") == "pug"
    assert breed_path("French Bulldog") == "bulldog/french"


@pytest.mark.asyncio
async def test_fetch_breeds_flattens_sub_breeds():
    async with client_for(dog_api) as client:
        assert await fetch_breeds(client) == ["boston bulldog", "french bulldog", "pug"]


@pytest.mark.asyncio
async def test_fetch_breeds_error_status():
    def failing(request):
        return httpx.Response(500, json={"status": "error", "message": "down for maintenance"})

    async with client_for(failing) as client:
        with pytest.raises(ApiError, match="down for maintenance"):
            await fetch_breeds(client)


@pytest.mark.asyncio
async def test_load_breeds_falls_back_to_empty():
    def failing(request):
        raise httpx.ConnectError("no route", request=request)

    async with client_for(failing) as client:
        state = DoggoState(client, ["stale"])
        await state.load_breeds()
    assert state.breeds == []


@pytest.mark.asyncio
async def test_query_random_and_breed():
    async with client_for(dog_api) as client:
        assert await query_api(client, BREEDS) == Doggo(PUG_URL)
        assert await query_api(client, BREEDS, "Pug") == Doggo(PUG_URL)


@pytest.mark.asyncio
async def test_query_unknown_breed_suggests():
    async with client_for(dog_api) as client:
        result = await query_api(client, BREEDS, "Bull")
        assert result == DoggoError("Did you mean any of these:\nbulldog\nboston bulldog\nfrench bulldog")
        assert await query_api(client, BREEDS, "cat") == DoggoError("Breed not found!")


@pytest.mark.asyncio
async def test_query_error_without_breed_passes_message():
    def failing(request):
        return httpx.Response(500, json={"status": "error", "message": "Internal error"})

    async with client_for(failing) as client:
        assert await query_api(client, BREEDS) == DoggoError("Internal error")


@pytest.mark.asyncio
async def test_doggo_command_uploads_once(sender, cache):
    context = make_context()
    async with client_for(dog_api) as client:
        doggo_command, _ = (h.callback for h in get_doggo_handlers(DoggoState(client, BREEDS), sender))
        await doggo_command(make_update("/doggo"), context)
        await doggo_command(make_update("/doggo pug"), context)

    assert [media for _, _, media, _ in context.bot.sent] == [PUG_URL, "photo-1"]
    assert cache.lookup(RemoteUrl(PUG_URL)) == "photo-1"


@pytest.mark.asyncio
async def test_doggo_command_replies_with_suggestions(sender):
    context = make_context()
    update = make_update("/doggo bull")
    async with client_for(dog_api) as client:
        doggo_command, _ = (h.callback for h in get_doggo_handlers(DoggoState(client, BREEDS), sender))
        await doggo_command(update, context)
    assert update.message.replies == ["Did you mean any of these:\nbulldog\nboston bulldog\nfrench bulldog"]
    assert context.bot.sent == []


@pytest.mark.asyncio
async def test_breeds_command(sender):
    update = make_update("/breeds")
    async with client_for(dog_api) as client:
        _, breeds_command = (h.callback for h in get_doggo_handlers(DoggoState(client, BREEDS), sender))
        await breeds_command(update, make_context())
    assert update.message.replies == ["Available doggo breeds:\n\n" + "\n".join(BREEDS)]


@pytest.mark.asyncio
async def test_query_wraps_transport_and_json_errors():
    def unreachable(request):
        raise httpx.ConnectError("no route to host", request=request)

    async with client_for(unreachable) as client:
        with pytest.raises(ApiError, match="error during API request: no route to host"):
            await query_api(client, BREEDS, "pug")

    async with client_for(lambda request: httpx.Response(502, text="Bad Gateway")) as client:
        with pytest.raises(ApiError, match="invalid JSON from https://dog.ceo/api/breeds/image/random"):
            await query_api(client, BREEDS)
