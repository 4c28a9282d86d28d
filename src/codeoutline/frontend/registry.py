"""Frontend plugin registry: discover and register language frontends."""

from __future__ import annotations

from pathlib import PurePath

from codeoutline.frontend.base import Frontend


class UnsupportedFrontendError(Exception):
    """Raised when no registered frontend matches a name or file suffix."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.frontend_name = name
        self.available = available
        super().__init__(f"Unsupported frontend '{name}'. Available: {', '.join(available)}")


class FrontendRegistry:
    """Registry for language frontend plugins, indexed by name and by file suffix."""

    _frontends: dict[str, type[Frontend]] = {}
    _by_suffix: dict[str, str] = {}

    @classmethod
    def register(cls, frontend_class: type[Frontend]) -> type[Frontend]:
        """Register a frontend class. Can be used as a decorator.

        A suffix claimed by an earlier frontend is taken over by the later one.
        """
        instance = frontend_class()
        cls._frontends[instance.name] = frontend_class
        for suffix in instance.suffixes:
            cls._by_suffix[suffix.lower()] = instance.name
        return frontend_class

    @classmethod
    def get(cls, name: str) -> Frontend:
        """Get an instance of the named frontend."""
        if name not in cls._frontends:
            raise UnsupportedFrontendError(name, available=cls.available())
        return cls._frontends[name]()

    @classmethod
    def for_path(cls, path: str) -> Frontend:
        """Get the frontend registered for the suffix of ``path``."""
        suffix = PurePath(path).suffix.lower()
        name = cls._by_suffix.get(suffix)
        if name is None:
            raise UnsupportedFrontendError(suffix or path, available=cls.available())
        return cls.get(name)

    @classmethod
    def suffixes(cls) -> dict[str, str]:
        """Map of file suffix to frontend name."""
        return dict(sorted(cls._by_suffix.items()))

    @classmethod
    def available(cls) -> list[str]:
        """List registered frontend names."""
        return sorted(cls._frontends.keys())

    @classmethod
    def reset(cls) -> None:
        """Clear all registered frontends (for testing)."""
        cls._frontends.clear()
        cls._by_suffix.clear()
