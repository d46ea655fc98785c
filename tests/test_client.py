import os
import sys
import unittest
from unittest import mock

import requests

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from client import WorkoutClient


def _response(status: int, headers=None, text: str = "") -> mock.Mock:
    resp = mock.Mock(status_code=status, headers=headers or {}, text=text)
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(str(status))
    return resp


class ClientTest(unittest.TestCase):
    def setUp(self) -> None:
        self.client = WorkoutClient(base_url="http://testserver/")

    @mock.patch("client.requests.post")
    def test_create_workout(self, post) -> None:
        post.return_value = _response(303, {"location": "/"})
        self.assertEqual(self.client.create_workout("Run", 30, "Park", "5k"), "/")
        post.assert_called_once_with(
            "http://testserver/workout/create",
            data={
                "exercise": "Run",
                "duration": "30",
                "location": "Park",
                "description": "5k",
            },
            allow_redirects=False,
        )

    @mock.patch("client.requests.post")
    def test_update_workout(self, post) -> None:
        post.return_value = _response(303, {"location": "/workout/3"})
        location = self.client.update_workout(3, "Bike", 60, "Road")
        self.assertEqual(location, "/workout/3")
        self.assertEqual(post.call_args[0][0], "http://testserver/workout/3/update")

    @mock.patch("client.requests.post")
    def test_bad_request_raises(self, post) -> None:
        post.return_value = _response(400)
        with self.assertRaises(requests.HTTPError):
            self.client.create_workout("Run", 30, "Park")

    @mock.patch("client.requests.get")
    def test_workout_page(self, get) -> None:
        get.return_value = _response(200, text="<h1>Run</h1>")
        self.assertIn("Run", self.client.workout_page(1))
        get.assert_called_once_with("http://testserver/workout/1")


if __name__ == "__main__":
    unittest.main()
