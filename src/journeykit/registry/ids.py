# journeykit/registry/ids.py
"""Sequential ids such as ``EXP-042-TEST-001`` or ``onboarding-EXP-003``."""

from collections import defaultdict
from collections.abc import Container


class IdSequence:
    """
    Per-prefix counters for generated ids.

    :meth:`next_free` only proposes an id; the counter moves when the id is
    :meth:`claim`-ed, so a rejected registration does not burn a number.
    Ids that are already taken (e.g. given explicitly) are skipped.

    :param infix: Text between the prefix and the number (``"TEST"``).
    """

    def __init__(self, infix: str) -> None:
        self.infix = infix
        self._last: dict[str, int] = defaultdict(int)

    def format(self, prefix: str, number: int, width: int) -> str:
        return f"{prefix}-{self.infix}-{number:0{width}d}"

    def next_free(self, prefix: str, width: int, taken: Container[str]) -> str:
        number = self._last[prefix]
        while True:
            number += 1
            candidate = self.format(prefix, number, width)
            if candidate not in taken:
                return candidate

    def claim(self, prefix: str, generated: str) -> None:
        number = int(generated.rsplit("-", 1)[1])
        self._last[prefix] = max(self._last[prefix], number)

    def clear(self) -> None:
        self._last.clear()
