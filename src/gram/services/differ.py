"""Diff flattened desired settings against flattened actual settings."""

from collections.abc import Mapping


def diff(desired: Mapping[str, str], actual: Mapping[str, str]) -> list[str]:
    """
    Compare desired values with actual values.

    Only keys in desired are checked; keys present only in actual
    are never reported.

    Args:
        desired: Flattened desired settings.
        actual: Flattened actual settings.

    Returns:
        Lexicographically sorted discrepancy lines. Empty when the
        actual settings satisfy every desired value.
    """
    diffs: list[str] = []
    for key, expected in desired.items():
        if key not in actual:
            diffs.append(f"[{key}]: expected [{expected}] but it has no value")
        elif actual[key] != expected:
            diffs.append(f"[{key}]: expected [{expected}] got [{actual[key]}]")
    return sorted(diffs)
