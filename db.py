import sqlite3
import aiosqlite
from contextlib import contextmanager, asynccontextmanager
from dataclasses import dataclass
from typing import List, Tuple, Optional


@dataclass
class Workout:
    id: int
    exercise: Optional[str]
    duration: Optional[int]
    location: Optional[str]
    description: Optional[str]

    @classmethod
    def from_row(cls, row: Tuple) -> "Workout":
        return cls(*row)


class Database:
    """Provides SQLite connection management and schema initialization."""

    _TABLE_DEFINITIONS = {
        "workouts": """CREATE TABLE workouts (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                exercise TEXT,
                duration INTEGER,
                location TEXT,
                description TEXT
            );""",
    }

    def __init__(self, db_path: str = "workouts.db") -> None:
        self._db_path = db_path
        self._ensure_schema()

    @property
    def db_path(self) -> str:
        return self._db_path

    @contextmanager
    def _connection(self):
        connection = sqlite3.connect(self._db_path)
        try:
            yield connection
            connection.commit()
        finally:
            connection.close()

    def _ensure_schema(self) -> None:
        with self._connection() as conn:
            for table, sql in self._TABLE_DEFINITIONS.items():
                self._ensure_table(conn, table, sql)

    def _ensure_table(self, conn: sqlite3.Connection, table: str, sql: str) -> None:
        cur = conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name=?;", (table,)
        )
        if cur.fetchone() is None:
            conn.execute(sql)


class BaseRepository(Database):
    """Base repository providing helper methods."""

    def execute(self, query: str, params: Tuple = ()) -> int:
        with self._connection() as conn:
            cursor = conn.cursor()
            cursor.execute(query, params)
            return cursor.lastrowid

    def fetch_all(self, query: str, params: Tuple = ()) -> List[Tuple]:
        with self._connection() as conn:
            cursor = conn.cursor()
            cursor.execute(query, params)
            return cursor.fetchall()


class WorkoutRepository(BaseRepository):
    """Repository for workout table operations."""

    _COLUMNS = "id, exercise, duration, location, description"

    def create(
        self,
        exercise: str,
        duration: int,
        location: str,
        description: str = "",
    ) -> int:
        return self.execute(
            "INSERT INTO workouts (exercise, duration, location, description) VALUES (?, ?, ?, ?);",
            (exercise, duration, location, description),
        )

    def fetch_all_workouts(self) -> List[Workout]:
        rows = self.fetch_all(f"SELECT {self._COLUMNS} FROM workouts ORDER BY id;")
        return [Workout.from_row(r) for r in rows]

    def fetch_detail(self, workout_id: int) -> Workout:
        rows = self.fetch_all(
            f"SELECT {self._COLUMNS} FROM workouts WHERE id = ?;",
            (workout_id,),
        )
        if not rows:
            raise ValueError("workout not found")
        return Workout.from_row(rows[0])

    def update(
        self,
        workout_id: int,
        exercise: str,
        duration: int,
        location: str,
        description: str,
    ) -> None:
        """Overwrite every field of a workout. Unknown ids are ignored."""
        self.execute(
            "UPDATE workouts SET exercise = ?, duration = ?, location = ?, description = ? WHERE id = ?;",
            (exercise, duration, location, description, workout_id),
        )


class AsyncDatabase(Database):
    """Provides asynchronous connection management."""

    @asynccontextmanager
    async def _async_connection(self):
        conn = await aiosqlite.connect(self._db_path)
        try:
            yield conn
            await conn.commit()
        finally:
            await conn.close()


class AsyncBaseRepository(AsyncDatabase):
    """Asynchronous variant of BaseRepository using aiosqlite."""

    async def execute(self, query: str, params: Tuple = ()) -> int:
        async with self._async_connection() as conn:
            cursor = await conn.execute(query, params)
            await conn.commit()
            return cursor.lastrowid

    async def fetch_all(self, query: str, params: Tuple = ()) -> List[Tuple]:
        async with self._async_connection() as conn:
            cursor = await conn.execute(query, params)
            rows = await cursor.fetchall()
            return rows


class AsyncWorkoutRepository(AsyncBaseRepository):
    """Async repository for workout table operations."""

    _COLUMNS = WorkoutRepository._COLUMNS

    async def create(
        self,
        exercise: str,
        duration: int,
        location: str,
        description: str = "",
    ) -> int:
        return await self.execute(
            "INSERT INTO workouts (exercise, duration, location, description) VALUES (?, ?, ?, ?);",
            (exercise, duration, location, description),
        )

    async def fetch_all_workouts(self) -> List[Workout]:
        rows = await self.fetch_all(
            f"SELECT {self._COLUMNS} FROM workouts ORDER BY id;"
        )
        return [Workout.from_row(r) for r in rows]

    async def fetch_detail(self, workout_id: int) -> Workout:
        rows = await self.fetch_all(
            f"SELECT {self._COLUMNS} FROM workouts WHERE id = ?;",
            (workout_id,),
        )
        if not rows:
            raise ValueError("workout not found")
        return Workout.from_row(rows[0])

    async def update(
        self,
        workout_id: int,
        exercise: str,
        duration: int,
        location: str,
        description: str,
    ) -> None:
        await self.execute(
            "UPDATE workouts SET exercise = ?, duration = ?, location = ?, description = ? WHERE id = ?;",
            (exercise, duration, location, description, workout_id),
        )
