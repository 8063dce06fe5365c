"""Tests for the command-line entry point."""

from __future__ import annotations

import json

import pytest

from polyhex.cli import build_parser, main


class TestArguments:
    def test_parses_max_size(self) -> None:
        args = build_parser().parse_args(["5"])
        assert args.max_size == 5
        assert args.output_dir is None
        assert args.verify is None

    @pytest.mark.parametrize("argv", [[], ["abc"], ["0"], ["-3"], ["2.5"]])
    def test_invalid_arguments_exit(self, argv) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 2


class TestMain:
    def test_writes_catalogs(self, tmp_path, capsys) -> None:
        main(["3", "--output-dir", str(tmp_path)])

        assert sorted(p.name for p in tmp_path.iterdir()) == ["2.json", "3.json"]
        assert json.loads((tmp_path / "2.json").read_text()) == {
            "0,0,0,1": "Rotation2FoldMirrorAll",
        }
        assert len(json.loads((tmp_path / "3.json").read_text())) == 3

        out = capsys.readouterr().out
        assert "up to size 3" in out

    def test_size_one_writes_nothing(self, tmp_path) -> None:
        main(["1", "--output-dir", str(tmp_path)])
        assert list(tmp_path.iterdir()) == []

    def test_verify_flag(self, tmp_path) -> None:
        main(["4", "--output-dir", str(tmp_path), "--verify", "--log-level", "debug"])
        assert len(json.loads((tmp_path / "4.json").read_text())) == 7

    def test_output_dir_from_settings(self, tmp_path, monkeypatch) -> None:
        from polyhex.config import settings

        monkeypatch.setattr(settings, "output_dir", tmp_path)
        main(["2"])
        assert (tmp_path / "2.json").exists()
