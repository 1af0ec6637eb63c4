from dataclasses import dataclass, fields

from .loader import (
    TRUE_VALUES,
    get_bool_env,
    get_int_env,
    get_str_env,
    load_yaml_config,
)


@dataclass(kw_only=True)
class Configuration:
    """The configurable fields for citation display."""

    # Display limits
    max_display_citations: int = 10

    # Output preferences
    fallback_title: str = "Source"
    include_snippets: bool = True

    def __post_init__(self):
        self.max_display_citations = int(self.max_display_citations)
        if isinstance(self.include_snippets, str):
            self.include_snippets = self.include_snippets.strip().lower() in TRUE_VALUES

    @classmethod
    def from_env(cls) -> "Configuration":
        """Create a Configuration instance from environment variables."""
        defaults = cls()
        return cls(
            max_display_citations=get_int_env(
                "MAX_DISPLAY_CITATIONS", defaults.max_display_citations
            ),
            fallback_title=get_str_env("FALLBACK_TITLE", defaults.fallback_title),
            include_snippets=get_bool_env(
                "INCLUDE_SNIPPETS", defaults.include_snippets
            ),
        )

    @classmethod
    def from_yaml(cls, file_path: str) -> "Configuration":
        """Create a Configuration instance from the ``citations`` section of a yaml file."""
        section = load_yaml_config(file_path).get("citations") or {}
        names = {f.name for f in fields(cls) if f.init}
        return cls(**{k: v for k, v in section.items() if k in names})


__all__ = ["Configuration"]
