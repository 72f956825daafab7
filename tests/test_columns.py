"""Column endpoint tests."""


def test_create_column(client, auth_headers, board):
    response = client.post(
        "/api/columns",
        headers=auth_headers,
        json={"boardId": board["id"], "title": "Review", "order": 3},
    )
    assert response.status_code == 201
    column = response.json()
    assert column["title"] == "Review"
    assert column["order"] == 3
    assert column["boardId"] == board["id"]

    columns = client.get(f"/api/boards/{board['id']}/columns", headers=auth_headers).json()
    assert [c["title"] for c in columns][-1] == "Review"

    refreshed = client.get(f"/api/boards/{board['id']}", headers=auth_headers).json()
    assert refreshed["lastUpdated"] >= board["lastUpdated"]


def test_create_column_missing_fields(client, auth_headers, board):
    response = client.post("/api/columns", headers=auth_headers, json={"boardId": board["id"]})
    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields: title, order"}


def test_create_column_on_missing_board(client, auth_headers):
    response = client.post(
        "/api/columns", headers=auth_headers, json={"boardId": "nope", "title": "X", "order": 0}
    )
    assert response.status_code == 404
    assert response.json() == {"error": "Board not found"}


def test_get_column(client, auth_headers, board):
    column = board["columns"][1]
    response = client.get(f"/api/columns/{column['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == column


def test_update_column(client, auth_headers, board):
    column = board["columns"][0]
    response = client.patch(
        f"/api/columns/{column['id']}", headers=auth_headers, json={"title": "Backlog"}
    )
    assert response.status_code == 200
    assert response.json()["title"] == "Backlog"
    assert response.json()["order"] == column["order"]


def test_update_column_empty_body(client, auth_headers, board):
    column = board["columns"][0]
    response = client.patch(f"/api/columns/{column['id']}", headers=auth_headers, json={})
    assert response.status_code == 400
    assert response.json() == {"error": "No fields to update"}


def test_update_column_cannot_change_board(client, auth_headers, board):
    column = board["columns"][0]
    response = client.patch(
        f"/api/columns/{column['id']}", headers=auth_headers, json={"boardId": "elsewhere"}
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Unknown field: boardId"}


def test_column_tasks_oldest_first(client, auth_headers, board):
    column = board["columns"][0]
    for title in ("first", "second", "third"):
        client.post(
            "/api/tasks",
            headers=auth_headers,
            json={"columnId": column["id"], "title": title, "priority": "medium"},
        )

    response = client.get(f"/api/columns/{column['id']}/tasks", headers=auth_headers)
    assert response.status_code == 200
    assert [t["title"] for t in response.json()] == ["first", "second", "third"]


def test_delete_column_removes_its_tasks(client, auth_headers, board):
    column = board["columns"][0]
    task = client.post(
        "/api/tasks",
        headers=auth_headers,
        json={"columnId": column["id"], "title": "Doomed", "priority": "low"},
    ).json()

    response = client.delete(f"/api/columns/{column['id']}", headers=auth_headers)
    assert response.status_code == 204

    assert client.get(f"/api/tasks/{task['id']}", headers=auth_headers).status_code == 404
    columns = client.get(f"/api/boards/{board['id']}/columns", headers=auth_headers).json()
    assert column["id"] not in [c["id"] for c in columns]


def test_delete_missing_column(client, auth_headers):
    response = client.delete("/api/columns/nope", headers=auth_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Column not found or access denied"}


def test_column_order_out_of_range(client, auth_headers, board):
    response = client.post(
        "/api/columns",
        headers=auth_headers,
        json={"boardId": board["id"], "title": "Huge", "order": 2**70},
    )
    assert response.status_code == 400
    assert response.json()["error"].startswith("order:")

    column = board["columns"][0]
    response = client.patch(
        f"/api/columns/{column['id']}", headers=auth_headers, json={"order": -(2**40)}
    )
    assert response.status_code == 400

    response = client.patch(
        f"/api/boards/{board['id']}/columns/reorder",
        headers=auth_headers,
        json={"columnOrders": [{"id": column["id"], "order": 2**31}]},
    )
    assert response.status_code == 400

    columns = client.get(f"/api/boards/{board['id']}/columns", headers=auth_headers).json()
    assert [c["order"] for c in columns] == [0, 1, 2]
