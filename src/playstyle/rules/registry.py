"""Rule registry: rules register themselves in declaration order."""

from __future__ import annotations

from collections.abc import Iterable

from playstyle.rules.base import Rule
from playstyle.settings import Settings


class UnknownRuleError(Exception):
    """Raised when a requested rule is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.rule_name = name
        self.available = available
        super().__init__(f"Unknown rule '{name}'. Available: {', '.join(available)}")


class RuleRegistry:
    """Registry for style rules."""

    _rules: dict[str, type[Rule]] = {}

    @classmethod
    def register(cls, rule_class: type[Rule]) -> type[Rule]:
        """Register a rule class. Can be used as a decorator."""
        # Instantiate to read the name property
        instance = rule_class()
        cls._rules[instance.name] = rule_class
        return rule_class

    @classmethod
    def get(cls, name: str, settings: Settings | None = None) -> Rule:
        """Get an instance of the named rule."""
        if name not in cls._rules:
            raise UnknownRuleError(name, available=cls.available())
        return cls._rules[name](settings)

    @classmethod
    def available(cls) -> list[str]:
        """List registered rule names in declaration order."""
        return list(cls._rules.keys())

    @classmethod
    def create(
        cls,
        settings: Settings | None = None,
        select: Iterable[str] | None = None,
        ignore: Iterable[str] = (),
    ) -> list[Rule]:
        """Instantiate the selected rules, keeping declaration order."""
        wanted = cls.available() if select is None else list(select)
        skipped = set(ignore)
        for name in (*wanted, *skipped):
            if name not in cls._rules:
                raise UnknownRuleError(name, available=cls.available())
        chosen = set(wanted) - skipped
        return [cls._rules[name](settings) for name in cls.available() if name in chosen]

    @classmethod
    def reset(cls) -> None:
        """Clear all registered rules (for testing)."""
        cls._rules.clear()
