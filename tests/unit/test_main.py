# tests/unit/test_main.py — v1
"""Tests for main.py — argument normalization, commands and exit codes."""

from __future__ import annotations

import json
import logging

import pytest

from warhol.main import main, normalize_generate_args
from warhol.version import __version__

_ENV_KEYS = (
    "DEFAULT_PROVIDER", "OUTPUT_DIR", "PROFILE_ROOTS", "LOG_FILE",
    "GEMINI_API_KEY", "GOOGLE_API_KEY", "OPENAI_API_KEY",
)


@pytest.fixture(autouse=True)
def _isolated(monkeypatch, project):
    """Run from inside the project with a clean environment and logger."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(project)

    root = logging.getLogger("warhol")
    saved = (list(root.handlers), root.level)
    yield
    for handler in root.handlers:
        if handler not in saved[0]:
            handler.close()
    root.handlers[:] = saved[0]
    root.setLevel(saved[1])


class TestNormalizeGenerateArgs:
    def test_dash_name_becomes_character(self):
        argv = ["generate", "-style", "noir", "-matt", "-prompt", "x"]
        assert normalize_generate_args(argv) == [
            "generate", "-style", "noir", "--character", "matt", "-prompt", "x",
        ]

    def test_known_flags_untouched(self):
        argv = ["generate", "-dry-run", "--model", "m", "-h"]
        assert normalize_generate_args(argv) == argv

    def test_assignment_untouched(self):
        argv = ["generate", "-prompt=a cat", "-x=1"]
        assert normalize_generate_args(argv) == argv

    def test_lone_dash_untouched(self):
        assert normalize_generate_args(["generate", "-"]) == ["generate", "-"]

    def test_other_commands_untouched(self):
        argv = ["style", "init", "-matt"]
        assert normalize_generate_args(argv) == argv

    def test_tokens_before_generate_untouched(self):
        argv = ["-v", "generate", "-matt"]
        assert normalize_generate_args(argv) == ["-v", "generate", "--character", "matt"]


class TestGenerateCommand:
    def test_dry_run(self, project, capsys):
        code = main([
            "generate", "-style", "noir", "-matt", "-prompt", "a cat", "-dry-run",
        ])
        out = capsys.readouterr().out
        assert code == 0
        assert "Prompt: Neon noir. high contrast. Lanky courier." in out
        assert "Dry run: image generation skipped." in out

        manifests = list((project / "outputs").glob("manifest-*.json"))
        assert len(manifests) == 1
        doc = json.loads(manifests[0].read_text(encoding="utf-8"))
        assert doc["style_file"] == "styles/noir.yaml"
        assert doc["character"] == "matt"
        assert doc["dry_run"] is True

    def test_out_dir(self, project, capsys):
        code = main([
            "generate", "--style", "noir", "--prompt", "p",
            "--out-dir", "renders", "--dry-run",
        ])
        assert code == 0
        assert len(list((project / "renders").glob("manifest-*.json"))) == 1

    def test_unsupported_provider(self, project, capsys):
        code = main([
            "generate", "-style", "noir", "-prompt", "p", "-provider", "stability",
        ])
        assert code == 2
        assert "invalid model/provider" in capsys.readouterr().err
        assert not (project / "outputs").exists()

    def test_missing_credential(self, project, capsys):
        code = main(["generate", "-style", "noir", "-prompt", "p"])
        assert code == 1
        assert "GEMINI_API_KEY (or GOOGLE_API_KEY) is required" in capsys.readouterr().err

    def test_missing_style(self, capsys):
        code = main(["generate", "-style", "ghost", "-prompt", "p", "-dry-run"])
        assert code == 1
        assert "styles profile not found" in capsys.readouterr().err

    def test_required_flags(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", "-prompt", "p"])
        assert exc_info.value.code == 2


class TestInitCommands:
    def test_style_init_default_path(self, project, capsys):
        assert main(["style", "init", "retro"]) == 0
        assert (project / "styles" / "retro.yaml").is_file()
        assert "Created style template: styles/retro.yaml" in capsys.readouterr().out

    def test_character_init_output(self, project, capsys):
        target = project / "elsewhere" / "ana.yaml"
        assert main(["character", "init", "ana", "-o", str(target)]) == 0
        assert "name: ana" in target.read_text(encoding="utf-8")

    def test_refuses_overwrite(self, project, capsys):
        assert main(["style", "init", "noir"]) == 1
        assert "file already exists" in capsys.readouterr().err


class TestMisc:
    def test_version_command(self, capsys):
        assert main(["version"]) == 0
        assert capsys.readouterr().out.strip() == __version__

    def test_no_command(self, capsys):
        assert main([]) == 1

    def test_invalid_configuration(self, monkeypatch, capsys):
        monkeypatch.setenv("PROFILE_ROOTS", ",")
        assert main(["version"]) == 1
        assert "invalid configuration" in capsys.readouterr().err

    def test_invalid_log_rotation(self, monkeypatch, capsys):
        monkeypatch.setenv("LOG_FILE", "logs/warhol.log")
        monkeypatch.setenv("LOG_ROTATION", "lots")
        assert main(["version"]) == 1
        assert "Invalid size format" in capsys.readouterr().err
