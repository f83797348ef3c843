"""
Group Search Module - Fuzzy narrowing of the log group list
"""
from typing import List

NO_MATCHES = "(no matches)"


def fuzzy_match(haystack: str, needle: str) -> bool:
    """Case-insensitive subsequence match ("wrk" matches "worker")"""
    if not needle:
        return True

    remaining = iter(haystack.lower())
    return all(char in remaining for char in needle.lower())


def filter_groups(groups: List[str], needle: str) -> List[str]:
    """
    Narrow groups to those matching the needle

    Returns:
        Matching groups in their original order, the full list for an
        empty needle, or ``[NO_MATCHES]`` if nothing matches
    """
    if not needle:
        return list(groups)

    matches = [group for group in groups if fuzzy_match(group, needle)]
    return matches or [NO_MATCHES]
