"""Every fixture under tests/fixtures is already formatted, so formatting must not change it."""

import unittest
from pathlib import Path

from markupfmt import Configuration, format

FIXTURE_DIR = Path(__file__).parent / "fixtures"


class TestFixtures(unittest.TestCase):
    def test_fixtures_exist(self):
        assert sorted(FIXTURE_DIR.glob("*.html"))

    def test_fixtures_are_stable(self):
        config = Configuration(line_width=80, indent_width=2)
        for path in sorted(FIXTURE_DIR.glob("*.html")):
            with self.subTest(fixture=path.name):
                raw = path.read_text(encoding="utf-8")
                assert format(raw, config) == raw

    def test_unformatted_fixture_input_converges(self):
        path = FIXTURE_DIR / "components.html"
        expected = path.read_text(encoding="utf-8")
        collapsed = " ".join(expected.split())
        assert format(collapsed) == expected


if __name__ == "__main__":
    unittest.main()
