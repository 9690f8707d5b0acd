"""Per-engine random streams derived from one run seed."""

from __future__ import annotations

import hashlib
import random
from dataclasses import dataclass, field


@dataclass
class DeterministicRNG:
    """Hands each engine its own seeded ``random.Random``.

    Boids, ants, Game of Life fills and art mutations all draw from a stream
    keyed by the engine name, so two runs with the same seed replay tick for
    tick and the global ``random`` module is never touched.
    """

    seed: int
    _streams: dict[str, random.Random] = field(default_factory=dict, init=False, repr=False)

    def stream(self, name: str) -> random.Random:
        """Return the stream for ``name``, creating it on first use."""
        stream = self._streams.get(name)
        if stream is None:
            # sha256 rather than hash() so the derived seed is stable across processes.
            digest = hashlib.sha256(f"{self.seed}:{name}".encode("utf-8")).digest()
            stream = random.Random(int.from_bytes(digest[:4], byteorder="big"))
            self._streams[name] = stream
        return stream
