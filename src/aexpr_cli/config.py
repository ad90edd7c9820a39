import logging
import tomllib
from dataclasses import fields
from pathlib import Path
from typing import Any

from aexpr_formatter.models import FormattingOptions
from aexpr_linter.language import DEFAULT_PROFILE, LanguageProfile
from aexpr_linter.models import DEFAULT_RULES, LintingOptions

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path(".aexpr.toml")


class ProjectConfig:
    """Handles loading of .aexpr.toml (or pyproject.toml) configuration"""

    def __init__(self, config_path: Path | None = None):
        self.lint: dict[str, Any] = {}
        self.format: dict[str, Any] = {}
        self.rules: dict[str, bool] = {}
        self.builtins: list[str] = []

        if config_path and config_path.exists():
            self._load_from_file(config_path)

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Ignoring unreadable config %s: %s", path, e)
            return

        tool = _table(_table(data, "tool", path), "aexpr", path)
        lint_data = _table(tool, "lint", path)
        self.rules = _table(lint_data, "rules", path)
        custom = _table(lint_data, "builtins", path).get("custom", [])
        if isinstance(custom, list):
            self.builtins = [str(name) for name in custom]
        else:
            logger.warning("Ignoring builtins.custom in %s: expected a list of names", path)
        self.lint = {k: v for k, v in lint_data.items() if k not in ("rules", "builtins")}
        self.format = _table(tool, "format", path)

        unknown = [r for r in self.rules if r not in DEFAULT_RULES]
        if unknown:
            logger.warning("Unknown rules in %s: %s", path, ", ".join(unknown))

    def linting_options(self) -> LintingOptions:
        rules = {**DEFAULT_RULES, **{k: v for k, v in self.rules.items() if k in DEFAULT_RULES}}
        return LintingOptions(rules=rules, **_known(LintingOptions, self.lint, exclude=("rules",)))

    def formatting_options(self) -> FormattingOptions:
        """Raises ValueError for invalid indent/quote styles."""
        return FormattingOptions(**_known(FormattingOptions, self.format))

    def profile(self) -> LanguageProfile:
        if not self.builtins:
            return DEFAULT_PROFILE
        return DEFAULT_PROFILE.with_builtins(self.builtins)


def _known(cls, data: dict[str, Any], exclude: tuple[str, ...] = ()) -> dict[str, Any]:
    names = {f.name for f in fields(cls)} - set(exclude)
    ignored = sorted(set(data) - names)
    if ignored:
        logger.warning("Ignoring unknown %s keys: %s", cls.__name__, ", ".join(ignored))
    return {k: v for k, v in data.items() if k in names}


def _table(data: dict[str, Any], key: str, path: Path) -> dict[str, Any]:
    """``data[key]`` as a dict; anything that is not a TOML table is ignored."""
    value = data.get(key, {})
    if not isinstance(value, dict):
        logger.warning("Ignoring '%s' in %s: expected a table, got %s", key, path, type(value).__name__)
        return {}
    return dict(value)
