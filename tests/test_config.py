"""Unit tests for configuration (create_remix_plugin.config).

Tests cover:
- LanguageMode selection
- Toolchain profiles: build/watch/type-check commands, dev dependencies
- ScaffoldConfig defaults, project_root, validation
- ScaffoldConfig.from_env
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from create_remix_plugin.config import (
    DEFAULT_MIDDLEWARE_POINT_CHOICES,
    DEFAULT_SLOT_CHOICES,
    PACKAGED_FILES,
    RUNTIME_DEPENDENCIES,
    TOOLCHAIN_PROFILES,
    LanguageMode,
    ScaffoldConfig,
    toolchain_for,
)


# ---------------------------------------------------------------------------
# LanguageMode
# ---------------------------------------------------------------------------


class TestLanguageMode:
    @pytest.mark.unit
    def test_for_typing(self):
        assert LanguageMode.for_typing(True) is LanguageMode.TYPESCRIPT
        assert LanguageMode.for_typing(False) is LanguageMode.JAVASCRIPT

    @pytest.mark.unit
    def test_every_mode_has_a_profile(self):
        assert set(TOOLCHAIN_PROFILES) == set(LanguageMode)


# ---------------------------------------------------------------------------
# Toolchain profiles
# ---------------------------------------------------------------------------


class TestTypescriptProfile:
    @pytest.mark.unit
    def test_entry_extension(self):
        assert toolchain_for(True).entry_extension == "tsx"

    @pytest.mark.unit
    def test_build_command(self):
        assert toolchain_for(True).build_command == (
            "esbuild src/index.tsx --bundle --external:react --external:react-dom "
            "--outfile=dist/index.js --platform=browser --format=esm --minify"
        )

    @pytest.mark.unit
    def test_watch_command(self):
        watch = toolchain_for(True).watch_command
        assert watch.startswith("esbuild src/index.tsx ")
        assert watch.endswith("--watch")
        assert "--minify" not in watch

    @pytest.mark.unit
    def test_type_check(self):
        assert toolchain_for(True).type_check_command == "tsc --noEmit"

    @pytest.mark.unit
    def test_dev_dependencies(self):
        assert toolchain_for(True).dev_dependencies == {
            "esbuild": "^0.19.0",
            "adm-zip": "^0.5.10",
            "typescript": "^5.0.0",
            "@types/node": "^20.0.0",
            "@types/react": "^18.2.0",
            "@types/react-dom": "^18.2.0",
        }

    @pytest.mark.unit
    def test_emits_type_files(self):
        assert toolchain_for(True).emits_type_files is True


class TestJavascriptProfile:
    @pytest.mark.unit
    def test_entry_extension(self):
        assert toolchain_for(False).entry_extension == "jsx"

    @pytest.mark.unit
    def test_build_uses_jsx_source(self):
        build = toolchain_for(False).build_command
        assert build.startswith("esbuild src/index.jsx ")
        assert build.endswith("--minify")

    @pytest.mark.unit
    def test_type_check_is_noop_message(self):
        assert toolchain_for(False).type_check_command == 'echo "No type checking needed"'

    @pytest.mark.unit
    def test_dev_dependencies_have_no_typing_packages(self):
        deps = toolchain_for(False).dev_dependencies
        assert list(deps) == ["esbuild", "adm-zip"]

    @pytest.mark.unit
    def test_no_type_files(self):
        assert toolchain_for(False).emits_type_files is False


class TestProfilesShared:
    @pytest.mark.unit
    @pytest.mark.parametrize("use_typescript", [True, False])
    def test_watch_differs_from_build_only_in_final_flag(self, use_typescript):
        profile = toolchain_for(use_typescript)
        assert profile.build_command.replace("--minify", "--watch") == profile.watch_command

    @pytest.mark.unit
    def test_profiles_are_frozen(self):
        with pytest.raises(ValidationError):
            toolchain_for(True).build_command = "make"

    @pytest.mark.unit
    def test_runtime_dependencies(self):
        assert RUNTIME_DEPENDENCIES == {"react": "^18.2.0", "react-dom": "^18.2.0"}

    @pytest.mark.unit
    def test_packaged_files(self):
        assert PACKAGED_FILES == ("dist/index.js", "plugin.json", "README.md")


# ---------------------------------------------------------------------------
# ScaffoldConfig
# ---------------------------------------------------------------------------


class TestScaffoldConfig:
    @pytest.mark.unit
    def test_defaults(self):
        config = ScaffoldConfig()
        assert config.output_dir == Path.cwd()
        assert config.default_name == "my-bolt-plugin"
        assert config.default_use_typescript is True
        assert config.slot_choices == list(DEFAULT_SLOT_CHOICES)
        assert config.middleware_point_choices == list(DEFAULT_MIDDLEWARE_POINT_CHOICES)

    @pytest.mark.unit
    def test_default_choices(self):
        assert DEFAULT_SLOT_CHOICES == ("app-header", "workbench-header", "settings-tab")
        assert DEFAULT_MIDDLEWARE_POINT_CHOICES == (
            "beforeUserInput",
            "afterUserInput",
            "beforeAssistantOutput",
            "afterAssistantOutput",
        )

    @pytest.mark.unit
    def test_choice_lists_are_independent(self):
        a = ScaffoldConfig()
        b = ScaffoldConfig()
        a.slot_choices.append("extra")
        assert "extra" not in b.slot_choices

    @pytest.mark.unit
    def test_project_root(self, tmp_path):
        config = ScaffoldConfig(output_dir=tmp_path)
        assert config.project_root("my-plugin") == tmp_path / "my-plugin"

    @pytest.mark.unit
    def test_invalid_default_name(self):
        with pytest.raises(ValidationError):
            ScaffoldConfig(default_name="My Plugin")


class TestScaffoldConfigFromEnv:
    @pytest.mark.unit
    def test_empty_env_gives_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = ScaffoldConfig.from_env()
        assert config.default_name == "my-bolt-plugin"
        assert config.slot_choices == list(DEFAULT_SLOT_CHOICES)

    @pytest.mark.unit
    def test_overrides(self, tmp_path):
        env = {
            "CREATE_PLUGIN_OUTPUT_DIR": str(tmp_path),
            "CREATE_PLUGIN_DEFAULT_NAME": "from-env",
            "CREATE_PLUGIN_SLOTS": "sidebar, footer ,",
            "CREATE_PLUGIN_MIDDLEWARE_POINTS": "beforeUserInput",
        }
        with patch.dict(os.environ, env, clear=True):
            config = ScaffoldConfig.from_env()
        assert config.output_dir == tmp_path
        assert config.default_name == "from-env"
        assert config.slot_choices == ["sidebar", "footer"]
        assert config.middleware_point_choices == ["beforeUserInput"]

    @pytest.mark.unit
    def test_invalid_name_from_env(self):
        with patch.dict(os.environ, {"CREATE_PLUGIN_DEFAULT_NAME": "Bad Name"}, clear=True):
            with pytest.raises(ValidationError):
                ScaffoldConfig.from_env()
