"""Semantic version coercion and npm-style range matching.

Release tags are free-form ("v1.2.3", "release-1.2", "dgraph-1.0.11-rc1"), so
versions are coerced out of them leniently. Ranges use the npm syntax that
release consumers are used to ("^1.0", "~1.2.3", ">=1.0 <2.0", "1.x || 2.x")
and are translated into ``packaging`` specifier sets for evaluation.
"""

import re

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import Version


class InvalidRange(ValueError):
    """Range expression could not be parsed."""

    pass


# First run of up to three dot-separated numbers not touching other digits
COERCE_PATTERN = re.compile(
    r"(?:^|[^\d])(\d{1,16})(?:\.(\d{1,16}))?(?:\.(\d{1,16}))?(?:$|[^\d])"
)

_PART = r"(0|[1-9]\d*|[xX*])"
COMPARATOR_PATTERN = re.compile(
    r"^(<=|>=|<|>|=|\^|~>|~)?v?"
    + _PART
    + r"(?:\."
    + _PART
    + r"(?:\."
    + _PART
    + r"(?:-[0-9A-Za-z.-]+)?(?:\+[0-9A-Za-z.-]+)?)?)?$"
)
HYPHEN_PATTERN = re.compile(r"^(\S+)\s+-\s+(\S+)$")
# "> 1.2" is the same comparator as ">1.2"
OPERATOR_SPACING = re.compile(r"(<=|>=|<|>|=|\^|~>|~)\s+")

MATCH_NOTHING = "<0.0.0"


def coerce_version(tag: str | None) -> Version | None:
    """Extract a semantic version from an arbitrary tag string.

    Missing minor/patch parts default to 0 and any prerelease or build suffix
    is dropped. Returns None when the tag holds no number at all.
    """
    if not tag:
        return None
    match = COERCE_PATTERN.search(tag)
    if match is None:
        return None
    major, minor, patch = (int(part or 0) for part in match.groups())
    return Version(f"{major}.{minor}.{patch}")


def _parse_partial(text: str) -> tuple[str, list[int]]:
    """Split a comparator into its operator and the numeric parts given.

    Wildcards end the numeric parts, so "1.x.3" reads as "1".
    """
    match = COMPARATOR_PATTERN.match(text)
    if match is None:
        raise InvalidRange(f"Invalid comparator: {text}")
    operator = match.group(1) or ""
    parts = []
    for part in match.groups()[1:]:
        if part is None or part in ("x", "X", "*"):
            break
        parts.append(int(part))
    return operator, parts


def _fill(parts: list[int]) -> str:
    padded = parts + [0] * (3 - len(parts))
    return ".".join(str(p) for p in padded)


def _bump(parts: list[int]) -> str:
    """Smallest version above every version the partial covers."""
    bumped = parts[:-1] + [parts[-1] + 1]
    return _fill(bumped)


def _upper_bound(parts: list[int]) -> str:
    """Inclusive upper bound of a version that may be partial."""
    if len(parts) == 3:
        return f"<={_fill(parts)}"
    return f"<{_bump(parts)}"


def _caret(parts: list[int]) -> list[str]:
    lower = f">={_fill(parts)}"
    if parts[0] > 0 or len(parts) == 1:
        return [lower, f"<{_bump(parts[:1])}"]
    if parts[1] > 0 or len(parts) == 2:
        return [lower, f"<{_bump(parts[:2])}"]
    return [lower, f"<{_bump(parts)}"]


def _comparator_specifiers(token: str) -> list[str]:
    operator, parts = _parse_partial(token)

    if not parts:
        # "*", "x", ">=*": anything. "<*" and ">*" can never match.
        return [MATCH_NOTHING] if operator in ("<", ">") else []

    if operator in ("", "="):
        if len(parts) == 3:
            return [f"=={_fill(parts)}"]
        return [f">={_fill(parts)}", f"<{_bump(parts)}"]
    if operator == "^":
        return _caret(parts)
    if operator in ("~", "~>"):
        if len(parts) == 1:
            return [f">={_fill(parts)}", f"<{_bump(parts)}"]
        return [f">={_fill(parts)}", f"<{_bump(parts[:2])}"]
    if operator == ">":
        if len(parts) == 3:
            return [f">{_fill(parts)}"]
        return [f">={_bump(parts)}"]
    if operator == ">=":
        return [f">={_fill(parts)}"]
    if operator == "<":
        return [f"<{_fill(parts)}"]
    # "<="
    return [_upper_bound(parts)]


def _hyphen_specifiers(low: str, high: str) -> list[str]:
    low_op, low_parts = _parse_partial(low)
    high_op, high_parts = _parse_partial(high)
    if low_op or high_op:
        raise InvalidRange(f"Operators are not allowed in hyphen ranges: {low} - {high}")
    specifiers = []
    if low_parts:
        specifiers.append(f">={_fill(low_parts)}")
    if high_parts:
        specifiers.append(_upper_bound(high_parts))
    return specifiers


def _comparator_set(text: str) -> SpecifierSet:
    text = text.strip()
    hyphen = HYPHEN_PATTERN.match(text)
    if hyphen:
        specifiers = _hyphen_specifiers(hyphen.group(1), hyphen.group(2))
    else:
        specifiers = []
        for token in OPERATOR_SPACING.sub(r"\1", text).split():
            specifiers.extend(_comparator_specifiers(token))
    try:
        return SpecifierSet(",".join(specifiers))
    except InvalidSpecifier as e:
        raise InvalidRange(f"Invalid range: {text}") from e


class VersionRange:
    """A parsed range: a version satisfies it if any alternative contains it."""

    def __init__(self, expression: str, alternatives: list[SpecifierSet]):
        self.expression = expression
        self.alternatives = alternatives

    @classmethod
    def parse(cls, expression: str) -> "VersionRange":
        """Parse an npm-style range expression.

        Raises InvalidRange if the expression is not valid range syntax.
        """
        if not isinstance(expression, str):
            raise InvalidRange(f"Invalid range: {expression!r}")
        alternatives = [_comparator_set(part) for part in expression.split("||")]
        return cls(expression, alternatives)

    def __contains__(self, version: Version) -> bool:
        return any(
            alternative.contains(version, prereleases=True)
            for alternative in self.alternatives
        )

    def __repr__(self) -> str:
        return f"VersionRange({self.expression!r})"


def is_valid_range(expression: str) -> bool:
    """Check whether an expression is valid range syntax."""
    try:
        VersionRange.parse(expression)
    except InvalidRange:
        return False
    return True
