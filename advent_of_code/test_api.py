import tempfile
import unittest
from pathlib import Path
from unittest import mock

from fastapi.testclient import TestClient

from advent_of_code import config
from advent_of_code.api import app


class TestSolutionsApi(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        patcher = mock.patch.object(config, "PROBLEM_DIR", Path(self.tmp.name))
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_health(self):
        self.assertEqual(self.client.get("/health").json(), {"ok": True})

    def test_list_days(self):
        days = self.client.get("/api/days").json()
        self.assertEqual([d["day"] for d in days], [1, 2])

    def test_solve_from_file(self):
        Path(self.tmp.name, "problem_1").write_text("R50\nR150\n")

        res = self.client.get("/api/days/1")

        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertEqual(body["day"], 1)
        self.assertEqual(body["part1"], 1)
        self.assertEqual(body["part2"], 2)
        self.assertIsNone(body["details"])

    def test_undecodable_input_file(self):
        Path(self.tmp.name, "problem_1").write_bytes(b"R50\n\xff\xfe\n")

        res = self.client.get("/api/days/1")

        self.assertEqual(res.status_code, 422)
        self.assertIn("utf-8", res.json()["detail"])

    def test_input_path_is_a_directory(self):
        Path(self.tmp.name, "problem_2").mkdir()

        res = self.client.get("/api/days/2")

        self.assertEqual(res.status_code, 422)

    def test_invalid_instruction_in_file(self):
        Path(self.tmp.name, "problem_1").write_text("R50\nX50\n")

        self.assertEqual(self.client.get("/api/days/1").status_code, 400)

    def test_missing_input_file(self):
        self.assertEqual(self.client.get("/api/days/2").status_code, 404)

    def test_unknown_day(self):
        self.assertEqual(self.client.get("/api/days/9").status_code, 404)
        res = self.client.post("/api/days/9", json={"input": "R1"})
        self.assertEqual(res.status_code, 404)

    def test_solve_from_text(self):
        res = self.client.post("/api/days/2", json={"input": "10-20,95-115"})

        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertEqual(body["part1"], 110)
        self.assertEqual(body["part2"], 221)
        self.assertEqual(body["details"]["sample_mirrors"], [11, 99])

    def test_invalid_instruction_is_rejected(self):
        res = self.client.post("/api/days/1", json={"input": "R50\nX50"})
        self.assertEqual(res.status_code, 400)
        self.assertIn("X50", res.json()["detail"])

    def test_empty_input_is_rejected(self):
        res = self.client.post("/api/days/1", json={"input": "   "})
        self.assertEqual(res.status_code, 400)


if __name__ == "__main__":
    unittest.main()
