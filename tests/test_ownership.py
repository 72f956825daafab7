"""Another user's boards, columns and tasks look exactly like missing ones."""

import pytest


@pytest.fixture
def foreign(client, other_auth_headers):
    """A board, column and task belonging to the other user."""
    board = client.post(
        "/api/boards", headers=other_auth_headers, json={"title": "Private", "color": "red"}
    ).json()
    column = client.get(f"/api/boards/{board['id']}/columns", headers=other_auth_headers).json()[0]
    task = client.post(
        "/api/tasks",
        headers=other_auth_headers,
        json={"columnId": column["id"], "title": "Secret", "priority": "high"},
    ).json()
    return {"board": board, "column": column, "task": task}


@pytest.mark.parametrize(
    "method,path,body",
    [
        ("GET", "/api/boards/{board}", None),
        ("PATCH", "/api/boards/{board}", {"title": "Mine now"}),
        ("DELETE", "/api/boards/{board}", None),
        ("PATCH", "/api/boards/{board}/star", None),
        ("PATCH", "/api/boards/{board}/view", None),
        ("GET", "/api/boards/{board}/columns", None),
        ("GET", "/api/boards/{board}/tasks", None),
        ("PATCH", "/api/boards/{board}/columns/reorder", {"columnOrders": []}),
        ("GET", "/api/columns/{column}", None),
        ("PATCH", "/api/columns/{column}", {"title": "Mine now"}),
        ("DELETE", "/api/columns/{column}", None),
        ("GET", "/api/columns/{column}/tasks", None),
        ("GET", "/api/tasks/{task}", None),
        ("PATCH", "/api/tasks/{task}", {"title": "Mine now"}),
        ("DELETE", "/api/tasks/{task}", None),
    ],
)
def test_foreign_resources_are_not_found(client, auth_headers, foreign, method, path, body):
    url = path.format(
        board=foreign["board"]["id"], column=foreign["column"]["id"], task=foreign["task"]["id"]
    )
    response = client.request(method, url, headers=auth_headers, json=body)
    assert response.status_code == 404


def test_foreign_resources_survive(client, auth_headers, other_auth_headers, foreign):
    client.delete(f"/api/boards/{foreign['board']['id']}", headers=auth_headers)
    client.delete(f"/api/tasks/{foreign['task']['id']}", headers=auth_headers)
    client.patch(f"/api/boards/{foreign['board']['id']}/star", headers=auth_headers)

    board = client.get(f"/api/boards/{foreign['board']['id']}", headers=other_auth_headers)
    task = client.get(f"/api/tasks/{foreign['task']['id']}", headers=other_auth_headers)
    assert board.status_code == 200
    assert board.json()["isStarred"] is False
    assert task.status_code == 200


def test_foreign_boards_not_listed(client, auth_headers, foreign):
    assert client.get("/api/boards", headers=auth_headers).json() == []
    assert client.get("/api/tasks", headers=auth_headers).json() == []


def test_cannot_create_in_foreign_board_or_column(client, auth_headers, foreign):
    column = client.post(
        "/api/columns",
        headers=auth_headers,
        json={"boardId": foreign["board"]["id"], "title": "Sneaky", "order": 9},
    )
    task = client.post(
        "/api/tasks",
        headers=auth_headers,
        json={"columnId": foreign["column"]["id"], "title": "Sneaky", "priority": "low"},
    )
    assert column.status_code == 404
    assert task.status_code == 404


def test_move_task_into_foreign_column(client, auth_headers, other_auth_headers, board, foreign):
    own = client.post(
        "/api/tasks",
        headers=auth_headers,
        json={"columnId": board["columns"][0]["id"], "title": "Mine", "priority": "low"},
    ).json()

    moved = client.patch(
        f"/api/tasks/{own['id']}/move",
        headers=auth_headers,
        json={"columnId": foreign["column"]["id"]},
    )
    updated = client.patch(
        f"/api/tasks/{own['id']}", headers=auth_headers, json={"columnId": foreign["column"]["id"]}
    )
    assert moved.status_code == 404
    assert updated.status_code == 404

    unchanged = client.get(f"/api/tasks/{own['id']}", headers=auth_headers).json()
    assert unchanged["columnId"] == board["columns"][0]["id"]

    foreign_tasks = client.get(
        f"/api/columns/{foreign['column']['id']}/tasks", headers=other_auth_headers
    ).json()
    assert [t["id"] for t in foreign_tasks] == [foreign["task"]["id"]]


def test_reorder_with_foreign_column_id(client, auth_headers, board, foreign):
    response = client.patch(
        f"/api/boards/{board['id']}/columns/reorder",
        headers=auth_headers,
        json={"columnOrders": [{"id": foreign["column"]["id"], "order": 0}]},
    )
    assert response.status_code == 404
