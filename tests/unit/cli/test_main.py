"""Unit tests for the starbar command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from starbar.cli.main import build_arg_parser, format_row, main
from starbar.core.rating import RatingConfig, StarRatingWidget


class TestFormatRow:
    """Glyph rendering."""

    def test_glyphs_follow_states(self) -> None:
        row = StarRatingWidget(RatingConfig(rating=2.5, show_half_stars=True)).render()
        assert format_row(row).plain == "★★⯪☆☆"

    def test_unknown_color_renders_plain(self) -> None:
        row = StarRatingWidget(RatingConfig(rating=1, static_color="not-a-color")).render()
        assert format_row(row).plain == "★☆☆☆☆"


class TestRender:
    """`starbar render`."""

    def test_render_overrides(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["render", "--rating", "3.63", "--stars", "6", "--half", "--label", "Rated"])

        out = capsys.readouterr().out
        assert code == 0
        assert "Rated ★★★⯪☆☆" in out
        assert "rating value-3 half medium label-left space-small" in out

    def test_render_from_config(self, fixtures_dir: Path, capsys) -> None:
        code = main(["render", "--config", str(fixtures_dir / "widget.json")])

        out = capsys.readouterr().out
        assert code == 0
        assert "★★" + "☆" * 13 in out
        assert "read-only" in out

    def test_render_writes_json(self, tmp_path: Path, capsys) -> None:
        out_path = tmp_path / "row.json"

        code = main(["render", "--rating", "2", "--json", str(out_path)])

        data = json.loads(out_path.read_text())
        assert code == 0
        assert [s["state"] for s in data["stars"]] == ["filled", "filled", "empty", "empty", "empty"]
        assert data["color"] == RatingConfig().color_negative

    def test_missing_config(self, tmp_path: Path, capsys) -> None:
        code = main(["render", "--config", str(tmp_path / "missing.yaml")])

        assert code == 1
        assert "Could not load config" in capsys.readouterr().out

    def test_invalid_config(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "widget.yaml"
        path.write_text("colorBands:\n  - thresholdRating: 2\n    color: red\n")

        code = main(["render", "--config", str(path)])

        assert code == 1
        assert "validation error for RatingConfig" in capsys.readouterr().out

    @pytest.mark.parametrize("rating", ["inf", "nan"])
    def test_non_finite_rating(self, rating: str, capsys) -> None:
        code = main(["render", "--rating", rating])

        assert code == 1
        assert "validation error for RatingConfig" in capsys.readouterr().out


class TestPress:
    """`starbar press`."""

    def test_keys_and_clicks(self, capsys) -> None:
        code = main(["press", "--rating", "3", "ArrowUp", "ArrowUp", "ArrowUp", "click:2", "Tab"])

        out = capsys.readouterr().out
        assert code == 0
        assert "ratingchange: 3 -> 4" in out
        assert "ratingchange: 4 -> 5" in out
        assert "ArrowUp: no change" in out
        assert "ratingchange: 5 -> 2" in out
        assert "Tab: no change" in out
        assert "★★☆☆☆" in out

    def test_digit_clamped(self, capsys) -> None:
        main(["press", "--stars", "6", "Digit9"])

        assert "ratingchange: 0 -> 6" in capsys.readouterr().out

    def test_invalid_click(self, capsys) -> None:
        code = main(["press", "click:x"])

        assert code == 1
        assert "Invalid click target" in capsys.readouterr().out


def test_parser_requires_command() -> None:
    with pytest.raises(SystemExit):
        build_arg_parser().parse_args([])
