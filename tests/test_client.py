"""KanbanClient tests against the in-process app."""

import httpx
import pytest

from kanban.client import ApiError, KanbanClient

pytestmark = pytest.mark.asyncio


async def sign_up(api, email="client@example.com"):
    return await api.register(email, "testpass123", "Client User")


async def test_register_stores_token_and_user(kanban_client):
    user = await sign_up(kanban_client)
    assert kanban_client.token
    assert kanban_client.user == user
    assert user.email == "client@example.com"

    profile = await kanban_client.get_profile()
    assert profile.id == user.id


async def test_api_error_carries_status_and_message(kanban_client):
    with pytest.raises(ApiError) as excinfo:
        await kanban_client.login("nobody@example.com", "whatever1")
    assert excinfo.value.status_code == 401
    assert excinfo.value.message == "Invalid email or password"
    assert kanban_client.token is None


async def test_add_board_pulls_seeded_columns(kanban_client):
    await sign_up(kanban_client)
    board = await kanban_client.add_board("Launch", "bg-blue-500")

    assert kanban_client.boards == [board]
    columns = kanban_client.get_board_columns(board.id)
    assert [c.title for c in columns] == ["To Do", "In Progress", "Done"]


async def test_task_lifecycle_mirrors_server(kanban_client):
    await sign_up(kanban_client)
    board = await kanban_client.add_board("Launch", "bg-blue-500")
    todo, doing, done = kanban_client.get_board_columns(board.id)

    task = await kanban_client.add_task(todo.id, "Write tests", priority="high")
    assert kanban_client.get_column_tasks(todo.id) == [task]

    moved = await kanban_client.move_task(task.id, doing.id)
    assert moved.column_id == doing.id
    assert kanban_client.get_column_tasks(todo.id) == []
    assert kanban_client.get_column_tasks(doing.id) == [moved]

    updated = await kanban_client.update_task(task.id, title="Write more tests")
    assert kanban_client.get_board_tasks(board.id) == [updated]

    await kanban_client.delete_task(task.id)
    assert kanban_client.tasks == []


async def test_move_column_renumbers(kanban_client):
    await sign_up(kanban_client)
    board = await kanban_client.add_board("Launch", "bg-blue-500")
    todo, doing, done = kanban_client.get_board_columns(board.id)

    columns = await kanban_client.move_column(done.id, 0)
    assert [(c.id, c.order) for c in columns] == [(done.id, 0), (todo.id, 1), (doing.id, 2)]
    assert kanban_client.get_board_columns(board.id) == columns


async def test_move_unknown_column_is_a_no_op(kanban_client):
    await sign_up(kanban_client)
    assert await kanban_client.move_column("not-cached", 0) == []


async def test_delete_column_drops_its_tasks(kanban_client):
    await sign_up(kanban_client)
    board = await kanban_client.add_board("Launch", "bg-blue-500")
    todo, doing, _ = kanban_client.get_board_columns(board.id)
    await kanban_client.add_task(todo.id, "Gone", priority="low")
    kept = await kanban_client.add_task(doing.id, "Kept", priority="low")

    await kanban_client.delete_column(todo.id)
    assert todo.id not in [c.id for c in kanban_client.columns]
    assert kanban_client.tasks == [kept]


async def test_delete_board_drops_columns_and_tasks(kanban_client):
    await sign_up(kanban_client)
    board = await kanban_client.add_board("Launch", "bg-blue-500")
    other = await kanban_client.add_board("Other", "red")
    await kanban_client.add_task(kanban_client.get_board_columns(board.id)[0].id, "T", priority="low")

    await kanban_client.delete_board(board.id)
    assert kanban_client.boards == [other]
    assert {c.board_id for c in kanban_client.columns} == {other.id}
    assert kanban_client.tasks == []


async def test_star_view_and_update_board(kanban_client):
    await sign_up(kanban_client)
    board = await kanban_client.add_board("Launch", "bg-blue-500")

    starred = await kanban_client.toggle_board_star(board.id)
    assert starred.is_starred is True
    viewed = await kanban_client.mark_board_as_viewed(board.id)
    assert viewed.last_viewed is not None
    renamed = await kanban_client.update_board(board.id, title="Relaunch")
    assert kanban_client.boards == [renamed]
    assert renamed.title == "Relaunch"
    assert renamed.is_starred is True


async def test_failed_mutation_leaves_cache_untouched(kanban_client):
    await sign_up(kanban_client)
    board = await kanban_client.add_board("Launch", "bg-blue-500")
    todo = kanban_client.get_board_columns(board.id)[0]
    task = await kanban_client.add_task(todo.id, "Stay", priority="low")

    with pytest.raises(ApiError) as excinfo:
        await kanban_client.move_task(task.id, "missing-column")
    assert excinfo.value.status_code == 404
    assert kanban_client.tasks == [task]


async def test_refresh_replaces_cache(kanban_client):
    await sign_up(kanban_client)
    board = await kanban_client.add_board("Launch", "bg-blue-500")
    todo = kanban_client.get_board_columns(board.id)[0]
    await kanban_client.add_task(todo.id, "Persisted", priority="medium")

    kanban_client.boards = []
    kanban_client.columns = []
    kanban_client.tasks = []
    await kanban_client.refresh()

    assert [b.id for b in kanban_client.boards] == [board.id]
    assert len(kanban_client.get_board_columns(board.id)) == 3
    assert [t.title for t in kanban_client.get_board_tasks(board.id)] == ["Persisted"]


async def test_logout_clears_everything(kanban_client):
    await sign_up(kanban_client)
    await kanban_client.add_board("Launch", "bg-blue-500")

    kanban_client.logout()
    assert kanban_client.token is None
    assert kanban_client.user is None
    assert kanban_client.boards == kanban_client.columns == kanban_client.tasks == []

    with pytest.raises(ApiError) as excinfo:
        await kanban_client.refresh()
    assert excinfo.value.status_code == 401


async def test_profile_and_password(kanban_client):
    await sign_up(kanban_client)
    user = await kanban_client.update_profile(name="Renamed", avatar_url="https://x.test/a.png")
    assert user.name == "Renamed"
    assert user.avatar_url == "https://x.test/a.png"

    message = await kanban_client.change_password("testpass123", "newpass456")
    assert message == "Password updated successfully"

    kanban_client.logout()
    await kanban_client.login("client@example.com", "newpass456")
    assert kanban_client.user.name == "Renamed"


@pytest.mark.parametrize(
    "status_code,body,message",
    [
        (502, ["upstream", "down"], "Bad Gateway"),
        (400, "just a string", "Bad Request"),
        (503, None, "Service Unavailable"),
        (409, {"error": "Email already registered"}, "Email already registered"),
    ],
)
async def test_error_bodies_of_any_shape_raise_api_error(status_code, body, message):
    def handler(request):
        if body is None:
            return httpx.Response(status_code, text="<html>oops</html>")
        return httpx.Response(status_code, json=body)

    async with KanbanClient(
        base_url="http://testserver/api", transport=httpx.MockTransport(handler)
    ) as api:
        with pytest.raises(ApiError) as excinfo:
            await api.get_profile()
    assert excinfo.value.status_code == status_code
    assert excinfo.value.message == message
