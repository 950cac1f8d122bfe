# topmark:header:start
#
#   project      : Worrywart
#   file         : model.py
#   file_relpath : src/worrywart/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reporting configuration: immutable snapshot and mutable builder.

`MutableReportingConfig` collects settings from defaults, discovered config
files, the environment and CLI overrides (in that order, last wins), then
`freeze()` produces the immutable `ReportingConfig` that builds sessions.

Config tables are checked with a `ReportingSession` of their own: unknown keys
are worries (logged, then ignored), invalid values are sorries and make loading
fail with `ConfigError`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from worrywart.config.keys import Toml
from worrywart.config.loaders import (
    ConfigError,
    extract_section,
    load_defaults_dict,
    load_toml_dict,
)
from worrywart.config.logging import get_logger
from worrywart.constants import (
    CONFIG_FILE_NAME,
    ENV_LIMIT,
    PYPROJECT_FILE_NAME,
    UNSPECIFIED_FILE,
)
from worrywart.diagnostic.kinds import DiagnosticKind
from worrywart.diagnostic.model import Severity
from worrywart.errors import Concerns
from worrywart.session import ReportingSession

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from worrywart.config.loaders import TomlTable
    from worrywart.config.logging import WorrywartLogger


logger: WorrywartLogger = get_logger(__name__)


@dataclass(frozen=True)
class UnknownConfigKey(DiagnosticKind):
    """A config key Worrywart does not know about."""

    code: ClassVar[str] = "config-unknown-key"

    key: str

    def message(self) -> str:
        return f"Unknown configuration key {self.key!r}"

    def hint(self) -> str | None:
        return f"known keys: {', '.join(sorted(Toml.ALL_KEYS))}"


@dataclass(frozen=True)
class InvalidConfigValue(DiagnosticKind):
    """A config value of the wrong type or out of range."""

    code: ClassVar[str] = "config-invalid-value"

    key: str
    expected: str
    got: object

    def message(self) -> str:
        return f"Invalid value for {self.key!r}: expected {self.expected}, got {self.got!r}"


@dataclass(frozen=True)
class ReportingConfig:
    """Immutable reporting configuration.

    Attributes:
        limit: Buffered worries/sorries allowed before a session escalates.
        filename: Default display label for sessions (None = unspecified).
        show_hints: Whether rendered reports include ``hint:`` lines.
        color: Whether rendered reports use ANSI colors.
        config_files: Files that contributed to this configuration, in merge order.
    """

    limit: int
    filename: str | None = None
    show_hints: bool = True
    color: bool = True
    config_files: tuple[Path, ...] = ()

    @classmethod
    def from_defaults(cls) -> ReportingConfig:
        """Return the runtime defaults as a frozen configuration."""
        return MutableReportingConfig.from_defaults().freeze()

    def thaw(self) -> MutableReportingConfig:
        """Return a mutable copy of this configuration."""
        return MutableReportingConfig(
            limit=self.limit,
            filename=self.filename,
            show_hints=self.show_hints,
            color=self.color,
            config_files=list(self.config_files),
        )

    def new_session(self, filename: str | None = None) -> ReportingSession:
        """Create a reporting session configured from this snapshot.

        Args:
            filename: Display label for the parse; falls back to the configured one.

        Returns:
            A fresh, active session.
        """
        label: str = filename or self.filename or UNSPECIFIED_FILE
        return ReportingSession(filename=label, limit=self.limit)


@dataclass
class MutableReportingConfig:
    """Mutable configuration builder; ``None`` means "inherit"."""

    limit: int | None = None
    filename: str | None = None
    show_hints: bool | None = None
    color: bool | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableReportingConfig:
        """Return a builder holding the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict(), source="<defaults>")

    @classmethod
    def from_toml_dict(cls, table: Mapping[str, Any], *, source: str) -> MutableReportingConfig:
        """Build a config layer from a parsed TOML table.

        Args:
            table: Worrywart settings (already extracted from ``pyproject.toml``).
            source: Display label of the table's origin, used in diagnostics.

        Returns:
            The parsed layer.

        Raises:
            ConfigError: If any value is invalid.
        """
        session: ReportingSession = ReportingSession(filename=source)
        # At most one report per key: the limit is never reached.
        session.set_limit(max(len(table), 1) + 1)
        draft = cls()

        for key, value in table.items():
            if key not in Toml.ALL_KEYS:
                session.worry(UnknownConfigKey(key))
            elif key == Toml.KEY_LIMIT:
                if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                    session.sorry(InvalidConfigValue(key, "a positive integer", value))
                else:
                    draft.limit = value
            elif key == Toml.KEY_FILENAME:
                if not isinstance(value, str) or not value:
                    session.sorry(InvalidConfigValue(key, "a non-empty string", value))
                else:
                    draft.filename = value
            elif key in (Toml.KEY_SHOW_HINTS, Toml.KEY_COLOR, Toml.KEY_ROOT):
                if not isinstance(value, bool):
                    session.sorry(InvalidConfigValue(key, "a boolean", value))
                elif key == Toml.KEY_SHOW_HINTS:
                    draft.show_hints = value
                elif key == Toml.KEY_COLOR:
                    draft.color = value

        try:
            session.express_concerns()
        except Concerns as failure:
            if any(d.severity is Severity.SORRY for d in failure.diagnostics):
                raise ConfigError(failure.render()) from failure
            for d in failure.diagnostics:
                logger.warning("%s: %s", source, d.message)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableReportingConfig | None:
        """Load a config layer from ``worrywart.toml`` or ``pyproject.toml``.

        Returns:
            The layer, or None when a ``pyproject.toml`` has no Worrywart section.

        Raises:
            ConfigError: If the file is unreadable or holds invalid values.
        """
        logger.debug("Loading reporting config from %s", path)
        section: TomlTable | None = extract_section(path, load_toml_dict(path))
        if section is None:
            return None
        draft: MutableReportingConfig = cls.from_toml_dict(section, source=str(path))
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found walking up from ``start``, root-most first.

        In a directory holding both, ``pyproject.toml`` comes before
        ``worrywart.toml`` so the latter wins the merge. A file setting
        ``root = true`` stops the walk after its directory.
        """
        collected: list[list[Path]] = []
        directory: Path = start.resolve()
        if directory.is_file():
            directory = directory.parent
        for current in (directory, *directory.parents):
            here: list[Path] = [
                current / name
                for name in (PYPROJECT_FILE_NAME, CONFIG_FILE_NAME)
                if (current / name).is_file()
            ]
            if here:
                collected.append(here)
            if any(_declares_root(p) for p in here):
                break
        return [p for group in reversed(collected) for p in group]

    @classmethod
    def load_merged(
        cls,
        start: Path | None = None,
        *,
        extra_files: Iterable[Path] = (),
        env: Mapping[str, str] | None = None,
    ) -> MutableReportingConfig:
        """Merge defaults, discovered files, extra files and the environment.

        Args:
            start: Directory where upward discovery begins (None = skip discovery).
            extra_files: Explicit config files, merged after discovered ones.
            env: Environment mapping (defaults to ``os.environ``).

        Returns:
            The merged builder; CLI overrides can still be applied before freezing.

        Raises:
            ConfigError: If any source is invalid.
        """
        merged: MutableReportingConfig = cls.from_defaults()
        paths: list[Path] = cls.discover_local_config_files(start) if start else []
        paths.extend(extra_files)
        for path in paths:
            layer: MutableReportingConfig | None = cls.from_toml_file(path)
            if layer is not None:
                merged = merged.merge_with(layer)
        merged.apply_env(os.environ if env is None else env)
        return merged

    def merge_with(self, other: MutableReportingConfig) -> MutableReportingConfig:
        """Return a new builder where values set in ``other`` override ours."""
        updates: dict[str, Any] = {
            f.name: getattr(other, f.name)
            for f in fields(self)
            if f.name != "config_files" and getattr(other, f.name) is not None
        }
        return replace(self, config_files=[*self.config_files, *other.config_files], **updates)

    def apply_env(self, env: Mapping[str, str]) -> None:
        """Apply environment overrides in place.

        Raises:
            ConfigError: If ``WORRYWART_LIMIT`` is not a positive integer.
        """
        raw: str | None = env.get(ENV_LIMIT)
        if raw is None or not raw.strip():
            return
        try:
            value = int(raw.strip())
        except ValueError:
            value = 0
        if value < 1:
            raise ConfigError(f"{ENV_LIMIT} must be a positive integer, got {raw!r}")
        logger.debug("Limit overridden by %s=%d", ENV_LIMIT, value)
        self.limit = value

    def freeze(self) -> ReportingConfig:
        """Freeze into an immutable `ReportingConfig`, filling unset values."""
        defaults: TomlTable = load_defaults_dict()
        return ReportingConfig(
            limit=self.limit if self.limit is not None else defaults[Toml.KEY_LIMIT],
            filename=self.filename,
            show_hints=(
                self.show_hints if self.show_hints is not None else defaults[Toml.KEY_SHOW_HINTS]
            ),
            color=self.color if self.color is not None else defaults[Toml.KEY_COLOR],
            config_files=tuple(self.config_files),
        )


def _declares_root(path: Path) -> bool:
    try:
        section: TomlTable | None = extract_section(path, load_toml_dict(path))
    except ConfigError:
        return False
    return bool(section and section.get(Toml.KEY_ROOT) is True)
