"""Test run configuration and the command line entry point."""

import json

import pytest
from pydantic import ValidationError

from src.config import LadderConfig, LadderQuery, build_lexicon, load_config
from src.main import main


@pytest.fixture
def lexicon_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(["cat", "cag", "dag", "dog", "cog", "cot", "dat"]) + "\n")
    return path


class TestConfig:
    """Test cases for YAML configuration loading."""

    def test_load_config(self, tmp_path, lexicon_file):
        path = tmp_path / "ladders.yaml"
        path.write_text(
            f"lexicon: {lexicon_file}\n"
            "verify: true\n"
            "words: [at, it]\n"
            "queries:\n"
            "  - from: cat\n"
            "    to: dog\n"
            "  - from: at\n"
            "    to: it\n"
        )
        config = load_config(str(path))
        assert config.lexicon == str(lexicon_file)
        assert config.verify is True
        assert config.queries == [
            LadderQuery(source="cat", target="dog"),
            LadderQuery(source="at", target="it"),
        ]

    def test_empty_config(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == LadderConfig()

    def test_boolean_like_words(self, tmp_path):
        """Unquoted yes/no/on/off stay words, and verify still parses as a bool."""
        path = tmp_path / "ladders.yaml"
        path.write_text(
            "verify: true\n"
            "words: [no, so, on, off, yes]\n"
            "queries:\n"
            "  - from: no\n"
            "    to: so\n"
        )
        config = load_config(str(path))
        assert config.verify is True
        assert config.words == ["no", "so", "on", "off", "yes"]
        assert config.queries == [LadderQuery(source="no", target="so")]

    def test_missing_config(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_malformed_query(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("queries:\n  - from: cat\n")
        with pytest.raises(ValidationError):
            load_config(str(path))

    def test_build_lexicon(self, lexicon_file):
        config = LadderConfig(lexicon=str(lexicon_file), words=["at", " it ", ""])
        lexicon = build_lexicon(config)
        assert {"cat", "dog", "at", "it"} <= lexicon
        assert "" not in lexicon

    def test_build_lexicon_missing_file(self, tmp_path):
        config = LadderConfig(lexicon=str(tmp_path / "missing.txt"), words=["at"])
        assert build_lexicon(config) == {"at"}


class TestMain:
    """Test cases for the CLI."""

    def test_prints_ladders(self, capsys, lexicon_file):
        assert main(["cat", "dog", "--lexicon", str(lexicon_file)]) == 0
        out = capsys.readouterr().out
        assert "{cat, cag, cog, dog}" in out
        assert "{cat, dat, dag, dog}" in out
        assert out.index("{cat, cag, cog, dog}") < out.index("{cat, dat, dag, dog}")

    def test_inline_words(self, capsys):
        assert main(["at", "it", "-w", "at", "-w", "it"]) == 0
        assert "{at, it}" in capsys.readouterr().out

    def test_no_ladder(self, capsys, lexicon_file):
        assert main(["cat", "pig", "-l", str(lexicon_file)]) == 0
        assert "No ladder found from 'cat' to 'pig'" in capsys.readouterr().out

    def test_verify_flag(self, capsys, lexicon_file):
        assert main(["cat", "dog", "-l", str(lexicon_file), "--verify"]) == 0
        assert "Ladders verified" in capsys.readouterr().out

    def test_verbose(self, capsys, lexicon_file):
        assert main(["cat", "dog", "-l", str(lexicon_file), "-v"]) == 0
        out = capsys.readouterr().out
        assert "(7 words)" in out
        assert "depth 3" in out

    def test_output_json(self, tmp_path, lexicon_file):
        output = tmp_path / "results" / "run.json"
        assert main(["cat", "dog", "-l", str(lexicon_file), "-o", str(output)]) == 0
        data = json.loads(output.read_text())
        assert data["lexicon_size"] == 7
        assert data["results"][0]["source"] == "cat"
        assert data["results"][0]["depth"] == 3
        assert len(data["results"][0]["ladders"]) == 4

    def test_config_file(self, capsys, tmp_path, lexicon_file):
        path = tmp_path / "ladders.yaml"
        path.write_text(
            f"lexicon: {lexicon_file}\n"
            "queries:\n"
            "  - {from: cat, to: dog}\n"
            "  - {from: cat, to: cot}\n"
        )
        assert main(["--config", str(path)]) == 0
        out = capsys.readouterr().out
        assert "{cat, cot}" in out
        assert out.count("-" * 72) == 2

    def test_config_with_boolean_like_words(self, capsys, tmp_path):
        """A config listing words such as 'no' and 'on' runs normally."""
        path = tmp_path / "ladders.yaml"
        path.write_text(
            "words: [no, so, on, in]\n"
            "queries:\n"
            "  - {from: no, to: so}\n"
        )
        assert main(["--config", str(path)]) == 0
        assert "{no, so}" in capsys.readouterr().out

    def test_repeated_queries_keep_validations(self, tmp_path, lexicon_file):
        """Each query gets its own validation entry, even when repeated."""
        path = tmp_path / "ladders.yaml"
        path.write_text(
            f"lexicon: {lexicon_file}\n"
            "verify: true\n"
            "queries:\n"
            "  - {from: cat, to: dog}\n"
            "  - {from: cat, to: dog}\n"
            "  - {from: cat, to: pig}\n"
        )
        output = tmp_path / "run.json"
        assert main(["--config", str(path), "-o", str(output)]) == 0
        data = json.loads(output.read_text())
        assert len(data["validations"]) == len(data["results"]) == 3
        assert [v["ladder_count"] for v in data["validations"]] == [4, 4, 0]

    def test_missing_words(self, capsys):
        assert main([]) == 1
        assert "Error" in capsys.readouterr().err

    def test_missing_target(self, capsys):
        assert main(["cat"]) == 1
        assert "both source and target" in capsys.readouterr().err

    def test_missing_config(self, capsys, tmp_path):
        assert main(["--config", str(tmp_path / "missing.yaml")]) == 1
        assert "Error loading config" in capsys.readouterr().err
