"""
Seniority level synonym table.

Maps each canonical seniority tier to the textual variants that identify it
inside a job's free-text level label. This is the only place that knows which
spellings (English, Portuguese, abbreviations) count as a given tier.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

# Tier order: entry, intermediate, senior
DEFAULT_LEVEL_SYNONYMS: Dict[str, Tuple[str, ...]] = {
    "Junior": ("Junior", "Júnior", "junio", "jr", "Beginner", "Iniciante"),
    "Mid": ("Mid", "Mid Level", "Pleno", "pl", "Intermediate", "Intermediário"),
    "Senior": ("Senior", "Sênior", "sr", "Expert", "Especialista"),
}


def _as_variant_list(level: str, variants: Any) -> List[str]:
    """Normalize one tier's variants to a list of strings (a bare string is one variant)."""
    if variants is None:
        return []
    if isinstance(variants, str):
        return [variants]
    if not isinstance(variants, (list, tuple)):
        raise ValueError(
            f"Synonyms for level '{level}' must be a list of strings, "
            f"got {type(variants).__name__}"
        )
    for variant in variants:
        if not isinstance(variant, str):
            raise ValueError(
                f"Synonyms for level '{level}' must be strings, "
                f"got {type(variant).__name__}: {variant!r}"
            )
    return list(variants)


class LevelSynonymTable(Mapping):
    """
    Read-only mapping from canonical level key to its accepted variants.

    Variants are matched case-insensitively as substrings of a job's level
    label. Lookups for unknown keys return an empty tuple instead of raising,
    so an unrecognized filter value simply matches nothing.

    Example:
        >>> table = LevelSynonymTable()
        >>> "jr" in table.synonyms_for("Junior")
        True
        >>> table.synonyms_for("Principal")
        ()
    """

    def __init__(self, synonyms: Optional[Dict[str, Iterable[str]]] = None):
        """
        Initialize the table.

        Args:
            synonyms: Mapping of canonical key to variants. Defaults to
                DEFAULT_LEVEL_SYNONYMS.

        Raises:
            ValueError: If a tier has no variants or a variant is not a string.
        """
        source = DEFAULT_LEVEL_SYNONYMS if synonyms is None else synonyms
        table: Dict[str, Tuple[str, ...]] = {}
        for level, variants in source.items():
            cleaned = tuple(v.strip() for v in _as_variant_list(level, variants) if v.strip())
            if not cleaned:
                raise ValueError(f"Level '{level}' must have at least one synonym")
            table[level] = cleaned
        self._table = table
        self._lowered = {
            level: tuple(v.lower() for v in variants) for level, variants in table.items()
        }

    def __getitem__(self, level: str) -> Tuple[str, ...]:
        return self._table[level]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"LevelSynonymTable(levels={list(self._table)})"

    @property
    def levels(self) -> Tuple[str, ...]:
        """Canonical level keys in tier order."""
        return tuple(self._table)

    def synonyms_for(self, level: str) -> Tuple[str, ...]:
        """Return the variants for a canonical key, or () if unknown."""
        return self._table.get(level, ())

    def lowered_synonyms_for(self, level: str) -> Tuple[str, ...]:
        """Return the lower-cased variants for a canonical key, or () if unknown."""
        return self._lowered.get(level, ())

    def extend(self, extra: Dict[str, Iterable[str]]) -> "LevelSynonymTable":
        """
        Return a new table with additional variants for existing tiers.

        The tier set is fixed, so extra variants may only be added to keys
        already present. Duplicate variants are ignored. This table is left
        unchanged.

        Args:
            extra: Mapping of canonical key to variants to append.

        Returns:
            New LevelSynonymTable.

        Raises:
            ValueError: If extra is not a mapping, names a level that is not
                in the table, or holds a variant that is not a string.
        """
        if not isinstance(extra, Mapping):
            raise ValueError(
                f"Extra synonyms must be a mapping of level to variants, got {type(extra).__name__}"
            )
        merged = {level: list(variants) for level, variants in self._table.items()}
        for level, variants in extra.items():
            if level not in merged:
                raise ValueError(
                    f"Unknown level '{level}'. Supported levels: {', '.join(self._table)}"
                )
            existing = {v.lower() for v in merged[level]}
            for variant in _as_variant_list(level, variants):
                if variant and variant.lower() not in existing:
                    merged[level].append(variant)
                    existing.add(variant.lower())
        return LevelSynonymTable(merged)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "LevelSynonymTable":
        """
        Build a table from application configuration.

        Reads ``levels.extra_synonyms`` and extends the default table with it.

        Args:
            config: Application configuration (loaded from config.yaml)

        Returns:
            LevelSynonymTable instance

        Raises:
            ValueError: If the levels section has the wrong shape.
        """
        levels_config = config.get("levels") or {}
        if not isinstance(levels_config, dict):
            raise ValueError(
                f"Config section 'levels' must be a mapping, got {type(levels_config).__name__}"
            )
        extra = levels_config.get("extra_synonyms") or {}
        if not extra:
            return DEFAULT_LEVEL_TABLE
        return DEFAULT_LEVEL_TABLE.extend(extra)


DEFAULT_LEVEL_TABLE = LevelSynonymTable()
