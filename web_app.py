import logging
import re
import sqlite3

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from config import APP_VERSION
from db import WorkoutRepository
from settings_schema import SettingsSchema

logger = logging.getLogger(__name__)

_ID_PATTERN = re.compile(r"[0-9]+")
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MAX = 2**63 - 1
_INT_MIN = -(2**63)


def parse_int(value: str, pattern: re.Pattern = _INT_PATTERN) -> int:
    """Parse a base-10 SQLite-sized integer, rejecting whitespace and underscores."""
    if not pattern.fullmatch(value or ""):
        raise ValueError(f"invalid integer: {value!r}")
    number = int(value)
    if not _INT_MIN <= number <= _INT_MAX:
        raise ValueError(f"integer out of range: {value!r}")
    return number


class WorkoutApp:
    """Serves the HTML pages for browsing and editing workouts."""

    TEMPLATE_NAMES = ("list.html", "new.html", "show.html", "edit.html")

    def __init__(
        self,
        workouts: WorkoutRepository,
        templates_dir: str,
        static_dir: str,
    ) -> None:
        self.workouts = workouts
        self.templates = Jinja2Templates(directory=templates_dir)
        # fail at startup rather than on first render
        for name in self.TEMPLATE_NAMES:
            self.templates.get_template(name)
        self.app = FastAPI(
            title="Workout Tracker",
            description="Track workouts by exercise, duration and location",
            version=APP_VERSION,
        )
        self.app.mount(
            "/static", StaticFiles(directory=static_dir), name="static"
        )
        self._setup_routes()

    def _render(self, request: Request, name: str, **context) -> HTMLResponse:
        return self.templates.TemplateResponse(request, name, context)

    @staticmethod
    def _parse_id(raw: str) -> int:
        try:
            return parse_int(raw, _ID_PATTERN)
        except ValueError:
            raise HTTPException(status_code=400, detail="Invalid workout ID")

    @staticmethod
    def _parse_duration(raw: str) -> int:
        try:
            return parse_int(raw)
        except ValueError as e:
            logger.warning("Invalid duration: %s", e)
            raise HTTPException(status_code=400, detail="Invalid duration")

    def _lookup(self, workout_id: int):
        try:
            return self.workouts.fetch_detail(workout_id)
        except ValueError:
            raise HTTPException(status_code=404, detail="Workout not found")
        except sqlite3.Error as e:
            logger.error("Database error: %s", e)
            raise HTTPException(status_code=500, detail=str(e))

    def _setup_routes(self) -> None:
        @self.app.get(
            "/health",
            summary="Health check",
            description="Verify API and database connectivity.",
        )
        def health():
            """Return API and database connection status."""
            try:
                self.workouts.fetch_all_workouts()
                return {"status": "ok"}
            except sqlite3.Error as e:
                raise HTTPException(status_code=500, detail=str(e))

        @self.app.get("/", response_class=HTMLResponse)
        def list_workouts(request: Request):
            try:
                workouts = self.workouts.fetch_all_workouts()
            except sqlite3.Error as e:
                logger.error("Database error: %s", e)
                raise HTTPException(status_code=500, detail=str(e))
            return self._render(request, "list.html", workouts=workouts)

        @self.app.get("/workout/new", response_class=HTMLResponse)
        def new_workout(request: Request):
            return self._render(request, "new.html")

        @self.app.post("/workout/create")
        def create_workout(
            exercise: str = Form(""),
            duration: str = Form(""),
            location: str = Form(""),
            description: str = Form(""),
        ):
            logger.debug(
                "Form values: exercise=%s, duration=%s, location=%s, description=%s",
                exercise,
                duration,
                location,
                description,
            )
            minutes = self._parse_duration(duration)
            try:
                workout_id = self.workouts.create(
                    exercise, minutes, location, description
                )
            except sqlite3.Error as e:
                logger.error("Database error: %s", e)
                raise HTTPException(status_code=500, detail=str(e))
            logger.info("Inserted workout with ID: %d", workout_id)
            return RedirectResponse(url="/", status_code=303)

        @self.app.get("/workout/{workout_id}", response_class=HTMLResponse)
        def show_workout(request: Request, workout_id: str):
            workout = self._lookup(self._parse_id(workout_id))
            return self._render(request, "show.html", workout=workout)

        @self.app.get("/workout/{workout_id}/edit", response_class=HTMLResponse)
        def edit_workout(request: Request, workout_id: str):
            workout = self._lookup(self._parse_id(workout_id))
            return self._render(request, "edit.html", workout=workout)

        @self.app.post("/workout/{workout_id}/update")
        def update_workout(
            workout_id: str,
            exercise: str = Form(""),
            duration: str = Form(""),
            location: str = Form(""),
            description: str = Form(""),
        ):
            wid = self._parse_id(workout_id)
            minutes = self._parse_duration(duration)
            try:
                self.workouts.update(wid, exercise, minutes, location, description)
            except sqlite3.Error as e:
                logger.error("Database error: %s", e)
                raise HTTPException(status_code=500, detail=str(e))
            logger.info("Updated workout with ID: %d", wid)
            return RedirectResponse(url=f"/workout/{wid}", status_code=303)


def create_app(settings: SettingsSchema | None = None) -> FastAPI:
    """Build the application from validated settings."""
    settings = settings or SettingsSchema()
    workouts = WorkoutRepository(settings.db_path)
    return WorkoutApp(workouts, settings.templates_dir, settings.static_dir).app
