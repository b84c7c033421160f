"""Parser and validation configuration options."""

from collections.abc import Iterable
from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Limits and vocabulary used by the post-parse validation pass.

    The grammar itself ignores these; they never change the parsed script.
    Empty vocabularies disable the matching unknown-name warnings.
    """

    max_statements: int | None = None
    max_condition_terms: int | None = None
    known_commands: frozenset[str] = frozenset()
    known_queries: frozenset[str] = frozenset()
    known_variables: frozenset[str] = frozenset()
    suggestion_cutoff: float = 0.75
    warn_orphan_fallback: bool = True

    def __post_init__(self) -> None:
        if self.max_statements is not None and self.max_statements < 0:
            raise ValueError("max_statements must be non-negative")
        if self.max_condition_terms is not None and self.max_condition_terms < 1:
            raise ValueError("max_condition_terms must be at least 1")
        if not 0.0 <= self.suggestion_cutoff <= 1.0:
            raise ValueError("suggestion_cutoff must be between 0 and 1")

    def with_vocabulary(
        self,
        *,
        commands: Iterable[str] | None = None,
        queries: Iterable[str] | None = None,
        variables: Iterable[str] | None = None,
    ) -> "ParserOptions":
        """Return a copy whose known names are extended with the given ones."""
        return replace(
            self,
            known_commands=self.known_commands | _lowered(commands),
            known_queries=self.known_queries | _lowered(queries),
            known_variables=self.known_variables | _lowered(variables),
        )


def _lowered(names: Iterable[str] | None) -> frozenset[str]:
    if names is None:
        return frozenset()
    return frozenset(name.lower() for name in names)
