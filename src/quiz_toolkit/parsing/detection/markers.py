"""Inline correctness markers.

An option line can declare itself correct with a trailing marker:
``*``, ``✓``, ``(correta)``, ``(certa)`` or ``-- correto``.
"""

from __future__ import annotations

import re
from typing import Tuple

MARKER_PATTERN = re.compile(
    r"\s*(?:"
    r"(?<!\*)\*"  # lone star; "**" closes markdown bold
    r"|[✓✔]"
    r"|\(\s*(?:corret[ao]|cert[ao]|correct)\s*\)"
    r"|--\s*corret[ao]"
    r")\s*$",
    re.IGNORECASE,
)


def split_marker(line: str) -> Tuple[str, bool]:
    """Strip a trailing correctness marker.

    Args:
        line: Normalized line.

    Returns:
        (text without the marker, whether a marker was present)

    Example:
        >>> split_marker("B) Brasília (correta)")
        ('B) Brasília', True)
    """
    match = MARKER_PATTERN.search(line)
    if not match:
        return line, False
    return line[:match.start()].rstrip(), True
