"""
Unit tests for core modules: Config, ContextBuilder, PromptComposer, command parsing.

Run with:
    pytest tests/test_core.py -v
"""

import json

import pytest

from rmit.config import Config, ConfigError, ConfigManager, DEFAULT_API_URL, DEFAULT_MODEL
from rmit.git import DiffSnapshot, DiffScope
from rmit.prompts import ContextBuilder, ProjectContext, PromptComposer, Variant, DIRECTIVE
from rmit.session import Command, parse_command


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

class TestConfig:

    def test_defaults(self):
        config = Config()
        assert config.api_key == ""
        assert config.api_url == DEFAULT_API_URL
        assert config.default_model == DEFAULT_MODEL

    def test_from_dict_ignores_unknown_keys(self):
        config = Config.from_dict({"default_model": "x/y", "unknown_key": "value"})
        assert config.default_model == "x/y"
        assert not hasattr(config, "unknown_key")

    def test_from_dict_empty_values_keep_defaults(self):
        config = Config.from_dict({"api_url": "", "default_model": ""})
        assert config.api_url == DEFAULT_API_URL
        assert config.default_model == DEFAULT_MODEL

    def test_set_rejects_unknown_key(self):
        with pytest.raises(ConfigError, match="Unknown configuration key"):
            Config().set("provider", "x")

    @pytest.mark.parametrize("key", ["api_key", "api_url"])
    def test_set_rejects_empty_required_values(self, key):
        with pytest.raises(ConfigError, match="cannot be empty"):
            Config().set(key, "  ")

    def test_set_allows_model(self):
        config = Config()
        config.set("default_model", "anthropic/claude-3-haiku")
        assert config.get("default_model") == "anthropic/claude-3-haiku"


class TestConfigManager:

    def test_load_returns_defaults_when_no_file(self, tmp_path):
        manager = ConfigManager(path=tmp_path / ".rmitconfig", environ={})
        config = manager.load()
        assert config == Config()

    def test_load_reads_file(self, tmp_path):
        path = tmp_path / ".rmitconfig"
        path.write_text(json.dumps({"api_key": "file-key", "default_model": "m/1"}))
        config = ConfigManager(path=path, environ={}).load()
        assert config.api_key == "file-key"
        assert config.default_model == "m/1"
        assert config.api_url == DEFAULT_API_URL

    def test_env_key_overrides_file(self, tmp_path):
        path = tmp_path / ".rmitconfig"
        path.write_text(json.dumps({"api_key": "file-key"}))
        manager = ConfigManager(path=path, environ={"OPENROUTER_API_KEY": "env-key"})
        assert manager.load().api_key == "env-key"
        assert manager.load_stored().api_key == "file-key"

    def test_save_and_load_roundtrip(self, tmp_path):
        path = tmp_path / ".rmitconfig"
        manager = ConfigManager(path=path, environ={})
        manager.save(Config(api_key="k", default_model="m/2"))

        data = json.loads(path.read_text())
        assert data == {"api_key": "k", "api_url": DEFAULT_API_URL, "default_model": "m/2"}
        assert ConfigManager(path=path, environ={}).load().default_model == "m/2"

    def test_malformed_json_returns_defaults(self, tmp_path, capsys):
        path = tmp_path / ".rmitconfig"
        path.write_text("not valid json {{{")
        config = ConfigManager(path=path, environ={}).load()
        assert config == Config()
        assert "Could not load" in capsys.readouterr().err

    def test_non_object_json_returns_defaults(self, tmp_path):
        path = tmp_path / ".rmitconfig"
        path.write_text("[1, 2]")
        assert ConfigManager(path=path, environ={}).load() == Config()

    def test_default_path_is_in_home(self, tmp_path, monkeypatch):
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path)
        assert ConfigManager(environ={}).path == tmp_path / ".rmitconfig"


# ---------------------------------------------------------------------------
# ContextBuilder
# ---------------------------------------------------------------------------

class TestContextBuilder:

    def test_no_markers_gives_empty_context(self, tmp_path):
        (tmp_path / "main.rs").write_text("")
        context = ContextBuilder().describe(tmp_path)
        assert context.descriptors == ()
        assert not context

    def test_single_marker(self, tmp_path):
        (tmp_path / "go.mod").write_text("module x")
        assert ContextBuilder().describe(tmp_path).text == "Go project."

    def test_multiple_markers_use_fixed_order(self, tmp_path):
        # Created in reverse of the table order
        for name in ["pyproject.toml", "CMakeLists.txt", "package.json", "go.mod"]:
            (tmp_path / name).write_text("")
        context = ContextBuilder().describe(tmp_path)
        assert context.descriptors == (
            "Go project.",
            "JavaScript/Node.js project.",
            "C/C++ project with CMake.",
            "Python project.",
        )

    def test_nested_markers_ignored(self, tmp_path):
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "pom.xml").write_text("")
        assert not ContextBuilder().describe(tmp_path)

    def test_missing_directory_warns_and_returns_empty(self, tmp_path, capsys):
        context = ContextBuilder().describe(tmp_path / "nope")
        assert not context
        assert "Couldn't get project info" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# PromptComposer
# ---------------------------------------------------------------------------

class TestPromptComposer:

    @pytest.fixture
    def composer(self):
        return PromptComposer()

    @pytest.fixture
    def diff(self):
        return DiffSnapshot(raw_text="+print('hi')\n", changed_files=("app.py",), scope=DiffScope.STAGED)

    @pytest.fixture
    def context(self):
        return ProjectContext(("Python project.",))

    def test_standard_contains_all_sections(self, composer, diff, context):
        prompt = composer.compose(Variant.STANDARD, diff, context, diff.changed_files)
        assert prompt.startswith(DIRECTIVE)
        assert "+print('hi')\n" in prompt
        assert "Changed files: app.py" in prompt
        assert "Project information: Python project." in prompt

    def test_section_order(self, composer, diff, context):
        prompt = composer.compose(Variant.STANDARD, diff, context, diff.changed_files)
        assert prompt.index("Python project.") < prompt.index("app.py") < prompt.index("+print('hi')")

    def test_directive_lists_conventional_prefixes(self):
        for prefix in ["feat:", "fix:", "docs:", "style:", "refactor:", "test:", "chore:"]:
            assert prefix in DIRECTIVE

    def test_empty_context_and_files_are_omitted(self, composer, diff):
        prompt = composer.compose(Variant.STANDARD, diff, ProjectContext(), [])
        assert "Project information" not in prompt
        assert "Changed files" not in prompt
        assert prompt == f"{DIRECTIVE}\n\nChanges:\n+print('hi')\n"

    def test_changed_files_comma_joined(self, composer, diff):
        prompt = composer.compose(Variant.STANDARD, diff, None, ["a.py", "b/c.py"])
        assert "Changed files: a.py, b/c.py" in prompt

    def test_composition_is_pure(self, composer, diff, context):
        args = (Variant.FEEDBACK_GUIDED, diff, context, diff.changed_files)
        assert composer.compose(*args, feedback="mention tests") == composer.compose(*args, feedback="mention tests")
        assert PromptComposer().compose(*args, feedback="x") == composer.compose(*args, feedback="x")

    def test_detailed_appends_request_to_same_diff(self, composer, diff):
        prompt = composer.compose(Variant.DETAILED, diff)
        assert "+print('hi')\n\n\nPlease provide a more detailed commit message" in prompt

    def test_summarize_replaces_diff_with_previous_message(self, composer, diff):
        prompt = composer.compose(Variant.SUMMARIZE, diff, previous_message="feat: add greeting output to the app")
        assert "50 characters or less" in prompt
        assert "feat: add greeting output to the app" in prompt
        assert "print('hi')" not in prompt

    def test_summarize_requires_previous_message(self, composer, diff):
        with pytest.raises(ValueError):
            composer.compose(Variant.SUMMARIZE, diff)

    def test_feedback_keeps_diff_and_feedback(self, composer, diff):
        prompt = composer.compose(Variant.FEEDBACK_GUIDED, diff, feedback="use the fix type")
        assert "Based on this diff:\n\n+print('hi')\n" in prompt
        assert "And considering this feedback: use the fix type" in prompt

    def test_feedback_requires_text(self, composer, diff):
        with pytest.raises(ValueError):
            composer.compose(Variant.FEEDBACK_GUIDED, diff)


# ---------------------------------------------------------------------------
# Command parsing
# ---------------------------------------------------------------------------

class TestParseCommand:

    @pytest.mark.parametrize("raw, expected", [
        ("", Command.ACCEPT),
        ("   ", Command.ACCEPT),
        ("y", Command.ACCEPT),
        ("YES", Command.ACCEPT),
        (" n \n", Command.REJECT),
        ("no", Command.REJECT),
        ("g", Command.DETAIL),
        ("R", Command.RETRY),
        ("s", Command.SHORTEN),
        ("p", Command.FEEDBACK),
        ("x", Command.INVALID),
        ("yep", Command.INVALID),
    ])
    def test_aliases(self, raw, expected):
        assert parse_command(raw) is expected


# ---------------------------------------------------------------------------
# DiffSnapshot
# ---------------------------------------------------------------------------

class TestDiffSnapshot:

    def test_empty_text_rejected(self):
        with pytest.raises(ValueError):
            DiffSnapshot(raw_text="")

    def test_is_immutable(self):
        snapshot = DiffSnapshot(raw_text="+x")
        with pytest.raises(AttributeError):
            snapshot.raw_text = "+y"
