"""
In-memory beam catalogue shared by the REST and gRPC gateways.
"""

from __future__ import annotations

import threading
from typing import Iterable, List, Optional

from .exceptions import BeamNotFoundError
from .models import SEED_BEAMS, Beam


class BeamStore:
    """Ordered, lock-guarded sequence of beams.

    Lookups are linear scans with exact, case-sensitive designation matching;
    the first match wins. Duplicate designations are accepted on create.
    Records are copied in and out so no caller shares state with the store.
    """

    def __init__(self, beams: Optional[Iterable[Beam]] = None) -> None:
        self._beams: List[Beam] = [b.model_copy() for b in beams or ()]
        self._lock = threading.Lock()

    @classmethod
    def seeded(cls) -> "BeamStore":
        return cls(SEED_BEAMS)

    def _index_of(self, designation: str) -> int:
        for i, beam in enumerate(self._beams):
            if beam.section_designation == designation:
                return i
        raise BeamNotFoundError(designation)

    def list_all(self) -> List[Beam]:
        with self._lock:
            return [b.model_copy() for b in self._beams]

    def count(self) -> int:
        with self._lock:
            return len(self._beams)

    def get(self, designation: str) -> Beam:
        with self._lock:
            return self._beams[self._index_of(designation)].model_copy()

    def create(self, beam: Beam) -> Beam:
        with self._lock:
            self._beams.append(beam.model_copy())
        return beam.model_copy()

    def replace(self, designation: str, beam: Beam) -> Beam:
        """Overwrite the first match in full. The stored designation becomes the body's."""
        with self._lock:
            self._beams[self._index_of(designation)] = beam.model_copy()
        return beam.model_copy()

    def delete(self, designation: str) -> None:
        with self._lock:
            del self._beams[self._index_of(designation)]
