from __future__ import annotations
from typing import Iterable, Optional, Sequence

from fishtox.core.models import FishSample

def unique_species(samples: Iterable[FishSample]) -> list[str]:
    """Distinct species labels, exact (case-sensitive) match, code-point order."""
    return sorted({s.species for s in samples})

def filter_by_species(
    samples: Sequence[FishSample],
    selected: Optional[Iterable[str]],
) -> list[FishSample]:
    # No selection means nothing is shown, not "everything".
    if not selected:
        return []
    wanted = set(selected)
    if not wanted:
        return []
    return [s for s in samples if s.species in wanted]

def group_by_species(samples: Iterable[FishSample]) -> dict[str, list[FishSample]]:
    """Group samples by species, keys in first-appearance order."""
    groups: dict[str, list[FishSample]] = {}
    for s in samples:
        groups.setdefault(s.species, []).append(s)
    return groups
