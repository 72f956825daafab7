"""Async API client with a local cache of boards, columns and tasks.

The server is the source of truth: the cache is only changed after a
successful response, and ``refresh()`` replaces it wholesale.
"""

import asyncio
import logging
from typing import Any

import httpx

from kanban.schemas.auth import AuthResponse, ProfileUpdate, UserResponse
from kanban.schemas.board import BoardCreate, BoardResponse, BoardUpdate
from kanban.schemas.column import ColumnCreate, ColumnResponse, ColumnUpdate
from kanban.schemas.task import TaskCreate, TaskResponse, TaskUpdate

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000/api"


class ApiError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


def _payload(model) -> dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True, exclude_unset=True)


class KanbanClient:
    """Client for the Kanban API mirroring every mutation into local state."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.token = token
        self.user: UserResponse | None = None
        self.boards: list[BoardResponse] = []
        self.columns: list[ColumnResponse] = []
        self.tasks: list[TaskResponse] = []
        self._http = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> "KanbanClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, path: str, json: Any = None) -> Any:
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        response = await self._http.request(method, path, json=json, headers=headers)

        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict) and "error" in body:
                message = str(body["error"])
            else:
                message = response.reason_phrase
            logger.error(f"API error {response.status_code} on {method} {path}: {message}")
            raise ApiError(response.status_code, message)

        if response.status_code == 204:
            return None
        return response.json()

    # ==================== AUTH ====================

    async def register(self, email: str, password: str, name: str) -> UserResponse:
        data = await self._request(
            "POST", "/auth/register", json={"email": email, "password": password, "name": name}
        )
        return self._sign_in(AuthResponse.model_validate(data))

    async def login(self, email: str, password: str) -> UserResponse:
        data = await self._request(
            "POST", "/auth/login", json={"email": email, "password": password}
        )
        return self._sign_in(AuthResponse.model_validate(data))

    def _sign_in(self, auth: AuthResponse) -> UserResponse:
        self.token = auth.token
        self.user = auth.user
        return auth.user

    def logout(self) -> None:
        """Forget the token, the user and every cached entity."""
        self.token = None
        self.user = None
        self.boards = []
        self.columns = []
        self.tasks = []

    async def get_profile(self) -> UserResponse:
        self.user = UserResponse.model_validate(await self._request("GET", "/auth/profile"))
        return self.user

    async def update_profile(self, **fields: Any) -> UserResponse:
        """Update ``name`` and/or ``avatar_url`` (None clears the avatar)."""
        data = await self._request("PATCH", "/auth/profile", json=_payload(ProfileUpdate(**fields)))
        self.user = UserResponse.model_validate(data)
        return self.user

    async def change_password(self, current_password: str, new_password: str) -> str:
        data = await self._request(
            "POST",
            "/auth/change-password",
            json={"currentPassword": current_password, "newPassword": new_password},
        )
        return data["message"]

    # ==================== SYNC ====================

    async def refresh(self) -> None:
        """Reload boards, tasks and every board's columns from the server."""
        boards_data, tasks_data = await asyncio.gather(
            self._request("GET", "/boards"),
            self._request("GET", "/tasks"),
        )
        boards = [BoardResponse.model_validate(b) for b in boards_data]

        columns: list[ColumnResponse] = []
        for board in boards:
            board_columns = await self._request("GET", f"/boards/{board.id}/columns")
            columns.extend(ColumnResponse.model_validate(c) for c in board_columns)

        self.boards = boards
        self.columns = columns
        self.tasks = [TaskResponse.model_validate(t) for t in tasks_data]

    # ==================== BOARD OPERATIONS ====================

    def _replace_board(self, board: BoardResponse) -> BoardResponse:
        self.boards = [board if b.id == board.id else b for b in self.boards]
        return board

    async def add_board(
        self, title: str, color: str, description: str | None = None
    ) -> BoardResponse:
        """Create a board and pull its seeded columns."""
        body = BoardCreate(title=title, color=color, description=description)
        board = BoardResponse.model_validate(await self._request("POST", "/boards", json=_payload(body)))
        self.boards.append(board)

        board_columns = await self._request("GET", f"/boards/{board.id}/columns")
        self.columns.extend(ColumnResponse.model_validate(c) for c in board_columns)
        return board

    async def update_board(self, board_id: str, **updates: Any) -> BoardResponse:
        data = await self._request(
            "PATCH", f"/boards/{board_id}", json=_payload(BoardUpdate(**updates))
        )
        return self._replace_board(BoardResponse.model_validate(data))

    async def toggle_board_star(self, board_id: str) -> BoardResponse:
        data = await self._request("PATCH", f"/boards/{board_id}/star")
        return self._replace_board(BoardResponse.model_validate(data))

    async def mark_board_as_viewed(self, board_id: str) -> BoardResponse:
        data = await self._request("PATCH", f"/boards/{board_id}/view")
        return self._replace_board(BoardResponse.model_validate(data))

    async def delete_board(self, board_id: str) -> None:
        await self._request("DELETE", f"/boards/{board_id}")

        column_ids = {c.id for c in self.columns if c.board_id == board_id}
        self.boards = [b for b in self.boards if b.id != board_id]
        self.columns = [c for c in self.columns if c.board_id != board_id]
        self.tasks = [t for t in self.tasks if t.column_id not in column_ids]

    # ==================== COLUMN OPERATIONS ====================

    async def add_column(self, board_id: str, title: str, order: int) -> ColumnResponse:
        body = ColumnCreate(board_id=board_id, title=title, order=order)
        column = ColumnResponse.model_validate(
            await self._request("POST", "/columns", json=_payload(body))
        )
        self.columns.append(column)
        return column

    async def update_column(self, column_id: str, **updates: Any) -> ColumnResponse:
        data = await self._request(
            "PATCH", f"/columns/{column_id}", json=_payload(ColumnUpdate(**updates))
        )
        column = ColumnResponse.model_validate(data)
        self.columns = [column if c.id == column_id else c for c in self.columns]
        return column

    async def delete_column(self, column_id: str) -> None:
        await self._request("DELETE", f"/columns/{column_id}")
        self.columns = [c for c in self.columns if c.id != column_id]
        self.tasks = [t for t in self.tasks if t.column_id != column_id]

    async def move_column(self, column_id: str, new_index: int) -> list[ColumnResponse]:
        """Move a column to ``new_index`` within its board and renumber 0..n-1.

        Returns the board's columns as stored by the server, or an empty list
        when the column is not in the cache.
        """
        column = next((c for c in self.columns if c.id == column_id), None)
        if column is None:
            return []

        board_columns = self.get_board_columns(column.board_id)
        board_columns.remove(column)
        board_columns.insert(new_index, column)
        column_orders = [{"id": c.id, "order": index} for index, c in enumerate(board_columns)]

        data = await self._request(
            "PATCH",
            f"/boards/{column.board_id}/columns/reorder",
            json={"columnOrders": column_orders},
        )
        updated = [ColumnResponse.model_validate(c) for c in data]
        self.columns = [c for c in self.columns if c.board_id != column.board_id] + updated
        return updated

    # ==================== TASK OPERATIONS ====================

    def _replace_task(self, task: TaskResponse) -> TaskResponse:
        self.tasks = [task if t.id == task.id else t for t in self.tasks]
        return task

    async def add_task(self, column_id: str, title: str, priority: str = "medium", **fields: Any) -> TaskResponse:
        """Create a task; ``description`` and ``due_date`` are optional."""
        body = TaskCreate(column_id=column_id, title=title, priority=priority, **fields)
        task = TaskResponse.model_validate(await self._request("POST", "/tasks", json=_payload(body)))
        self.tasks.append(task)
        return task

    async def update_task(self, task_id: str, **updates: Any) -> TaskResponse:
        data = await self._request(
            "PATCH", f"/tasks/{task_id}", json=_payload(TaskUpdate(**updates))
        )
        return self._replace_task(TaskResponse.model_validate(data))

    async def move_task(self, task_id: str, column_id: str) -> TaskResponse:
        data = await self._request("PATCH", f"/tasks/{task_id}/move", json={"columnId": column_id})
        return self._replace_task(TaskResponse.model_validate(data))

    async def delete_task(self, task_id: str) -> None:
        await self._request("DELETE", f"/tasks/{task_id}")
        self.tasks = [t for t in self.tasks if t.id != task_id]

    # ==================== GETTERS ====================

    def get_board_columns(self, board_id: str) -> list[ColumnResponse]:
        return sorted((c for c in self.columns if c.board_id == board_id), key=lambda c: c.order)

    def get_column_tasks(self, column_id: str) -> list[TaskResponse]:
        return [t for t in self.tasks if t.column_id == column_id]

    def get_board_tasks(self, board_id: str) -> list[TaskResponse]:
        column_ids = {c.id for c in self.columns if c.board_id == board_id}
        return [t for t in self.tasks if t.column_id in column_ids]
