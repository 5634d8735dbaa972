import re
from enum import IntEnum


class Stability(IntEnum):
    """Release stability of a package version.

    Lower values are more stable, so ``Stability.BETA <= Stability.DEV``
    reads as "beta is at least as stable as dev".
    """

    STABLE = 0
    RC = 5
    BETA = 10
    ALPHA = 15
    DEV = 20


_MODIFIER = re.compile(r"(?:[._-]?(alpha|beta|rc|a|b))(?:[._-]?\d+)?(?:[.-]?dev)?$", re.IGNORECASE)


def parse_stability(version: str) -> Stability:
    """Derive the stability of a version string.

    Examples:
        >>> parse_stability("1.0.0")
        <Stability.STABLE: 0>
        >>> parse_stability("2.1.0-beta2")
        <Stability.BETA: 10>
        >>> parse_stability("dev-main")
        <Stability.DEV: 20>
    """
    version = version.strip().lower()
    if version.startswith("dev-") or version.endswith("-dev"):
        return Stability.DEV

    match = _MODIFIER.search(version)
    if match is None:
        return Stability.STABLE

    modifier = match.group(1)
    if modifier == "rc":
        return Stability.RC
    if modifier in ("beta", "b"):
        return Stability.BETA
    return Stability.ALPHA
