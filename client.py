import requests


class WorkoutClient:
    """Simple HTTP client for the workout tracker's form endpoints."""

    def __init__(self, base_url: str = "http://localhost:8080") -> None:
        self.base_url = base_url.rstrip("/")

    @staticmethod
    def _form(exercise: str, duration: int, location: str, description: str) -> dict:
        return {
            "exercise": exercise,
            "duration": str(duration),
            "location": location,
            "description": description,
        }

    def create_workout(
        self, exercise: str, duration: int, location: str, description: str = ""
    ) -> str:
        """Submit the creation form and return the redirect target."""
        resp = requests.post(
            f"{self.base_url}/workout/create",
            data=self._form(exercise, duration, location, description),
            allow_redirects=False,
        )
        resp.raise_for_status()
        return resp.headers["location"]

    def update_workout(
        self,
        workout_id: int,
        exercise: str,
        duration: int,
        location: str,
        description: str = "",
    ) -> str:
        resp = requests.post(
            f"{self.base_url}/workout/{workout_id}/update",
            data=self._form(exercise, duration, location, description),
            allow_redirects=False,
        )
        resp.raise_for_status()
        return resp.headers["location"]

    def list_page(self) -> str:
        resp = requests.get(f"{self.base_url}/")
        resp.raise_for_status()
        return resp.text

    def workout_page(self, workout_id: int) -> str:
        resp = requests.get(f"{self.base_url}/workout/{workout_id}")
        resp.raise_for_status()
        return resp.text

    def health(self) -> dict:
        resp = requests.get(f"{self.base_url}/health", timeout=5)
        resp.raise_for_status()
        return resp.json()
