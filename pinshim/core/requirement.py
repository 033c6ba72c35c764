"""
Version requirements.

A requirement is either a semantic version range (``3.7``, ``=3.8.2``,
``>=3.6, <3.9``, ``*``) or the path to an interpreter directory. Ranges use
Cargo-style syntax: a clause without an operator is a caret requirement, so
``3.7.4`` accepts any ``3.x.y >= 3.7.4``.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

import semantic_version

from pinshim.core.exceptions import RequirementNotFoundError

logger = logging.getLogger(__name__)

LATEST_ALIAS = "latest"

_CLAUSE_RE = re.compile(r"^(?P<op><=|>=|==|!=|<|>|=|\^|~)?\s*(?P<version>\S+)$")
_WILDCARD_RE = re.compile(r"(^|\.)[xX](?=\.|$)")


@dataclass(frozen=True)
class RangeRequirement:
    """A semantic version range."""

    spec: semantic_version.SimpleSpec

    def __str__(self) -> str:
        return self.spec.expression


@dataclass(frozen=True)
class PathRequirement:
    """An interpreter directory; always absolute and canonical."""

    path: Path

    def __str__(self) -> str:
        return str(self.path)


VersionRequirement = Union[RangeRequirement, PathRequirement]


def _normalize_clause(clause: str) -> str:
    match = _CLAUSE_RE.match(clause.strip())
    if not match:
        raise ValueError(f"Invalid version clause {clause!r}")

    op = match.group("op") or ""
    version = _WILDCARD_RE.sub(r"\1*", match.group("version"))

    if not op and "*" not in version:
        # Bare versions are caret requirements
        op = "^"
    return f"{op}{version}"


def normalize_expression(text: str) -> str:
    """
    Rewrite a range expression into SimpleSpec syntax.

    Raises:
        ValueError: If a clause is empty or malformed
    """
    text = text.strip()
    if text == LATEST_ALIAS:
        text = "*"
    if not text:
        raise ValueError("Empty version requirement")
    return ",".join(_normalize_clause(clause) for clause in text.split(","))


def parse_range(text: str) -> RangeRequirement:
    """
    Parse a semantic version range.

    Raises:
        ValueError: If text is not a valid range
    """
    return RangeRequirement(semantic_version.SimpleSpec(normalize_expression(text)))


def parse(text: str) -> VersionRequirement:
    """
    Parse user input into a version requirement.

    Semantic version parsing is attempted first; on failure the input is
    interpreted as a path, which must exist.

    Args:
        text: Range expression, "latest", or filesystem path

    Returns:
        RangeRequirement or PathRequirement

    Raises:
        RequirementNotFoundError: If text is neither a valid range nor an
            existing path
    """
    text = text.strip()
    try:
        requirement = parse_range(text)
        logger.debug(f"Parsed {text!r} as semantic version: {requirement}")
        return requirement
    except ValueError as e:
        logger.debug(f"{text!r} is not a version range: {e}")

    path = Path(text).expanduser() if text else None
    if path is not None and path.exists():
        logger.debug(f"Parsed {text!r} as path: {path}")
        return PathRequirement(path.resolve())

    raise RequirementNotFoundError(text)


def format_requirement(requirement: VersionRequirement) -> str:
    """Render a requirement in the syntax accepted by parse()."""
    if isinstance(requirement, RangeRequirement):
        return requirement.spec.expression
    if isinstance(requirement, PathRequirement):
        return str(requirement.path)
    raise TypeError(f"Not a version requirement: {requirement!r}")


def exact(version: semantic_version.Version) -> RangeRequirement:
    """Requirement matching exactly one version."""
    return RangeRequirement(semantic_version.SimpleSpec(f"={version}"))


def _prerelease_clauses(requirement: RangeRequirement) -> List[semantic_version.Version]:
    """Full versions carrying a pre-release tag named by the range's clauses."""
    found = []
    for clause in requirement.spec.expression.split(","):
        match = _CLAUSE_RE.match(clause.strip())
        if not match:
            continue
        try:
            named = semantic_version.Version(match.group("version"))
        except ValueError:
            # Partial or wildcard versions never carry a pre-release tag
            continue
        if named.prerelease:
            found.append(named)
    return found


def matches(
    requirement: VersionRequirement, version: semantic_version.Version
) -> bool:
    """
    Check whether a concrete version satisfies a requirement.

    A pre-release only matches when one of the range's clauses names a
    pre-release of the same MAJOR.MINOR.PATCH, so ``3.7`` never selects
    ``3.9.0-rc.1`` while ``>=3.9.0-rc.1`` does. A path requirement names a
    location, not a version, and never matches.
    """
    if not isinstance(requirement, RangeRequirement):
        return False
    if not requirement.spec.match(version):
        return False
    if not version.prerelease:
        return True

    release = (version.major, version.minor, version.patch)
    return any(
        (named.major, named.minor, named.patch) == release
        for named in _prerelease_clauses(requirement)
    )
