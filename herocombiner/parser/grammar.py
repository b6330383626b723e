"""Line grammar for hero descriptor files.

Descriptors are loosely YAML-shaped:

    # yaml-language-server: $schema=...
    Alice:
      colouredName: &7Alice
      description: ...
      skills:
        - ...

Each field is extracted by its own scan over the lines. Only the first
matching line counts for a field, and fields don't depend on each other, so
a file with no name line still yields its skills.
"""

import logging

from ..core.models import Hero


logger = logging.getLogger(__name__)

COLOURED_NAME_TOKEN = "colouredName:"
SKILLS_TOKEN = "skills:"

# Keys that belong inside a hero block, never the hero itself
FIELD_KEYS = ("colouredName", "description", "skills")


def split_lines(text: str) -> list[str]:
    r"""Split on "\n" only, keeping each line's terminator."""
    lines = [line + "\n" for line in text.split("\n")]
    lines[-1] = lines[-1][:-1]
    return lines if lines[-1] else lines[:-1]


def _content(line: str) -> str:
    r"""Strip a trailing "\r\n", "\n" or "\r"."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def find_schema_header(lines: list[str]) -> str | None:
    """First line that starts with '#' after optional indentation."""
    for line in lines:
        content = _content(line)
        if content.lstrip(" ").startswith("#"):
            return content
    return None


def find_name(lines: list[str]) -> str | None:
    """First '#'-free line ending in ':' plus optional spaces.

    Returns everything before the final ':'. Descriptor field keys such as
    a bare 'skills:' are never taken as the name, and the scan stops at the
    skills line so keys inside the skills payload can't be picked up.
    """
    for line in lines:
        content = _content(line)
        if content.strip(" ") == SKILLS_TOKEN:
            break
        if "#" in content:
            continue
        stripped = content.rstrip(" ")
        if len(stripped) > 1 and stripped.endswith(":"):
            candidate = stripped[:-1]
            if candidate.strip(" ") in FIELD_KEYS:
                continue
            return candidate
    return None


def find_coloured_name(lines: list[str]) -> str | None:
    """Value of the first 'colouredName:' line."""
    for line in lines:
        content = _content(line).lstrip(" ")
        if content.startswith(COLOURED_NAME_TOKEN):
            return content[len(COLOURED_NAME_TOKEN):].lstrip(" ")
    return None


def find_skills(lines: list[str]) -> str | None:
    """Everything after the first bare 'skills:' line, verbatim.

    A 'skills:' line with nothing after it doesn't count.
    """
    for index, line in enumerate(lines[:-1]):
        if _content(line).strip(" ") == SKILLS_TOKEN:
            return "".join(lines[index + 1:])
    return None


def parse_hero(raw_text: str, source: str | None = None) -> Hero:
    """Extract a Hero from one descriptor's text.

    Trailing whitespace is dropped before scanning. Fields that can't be
    found are left as None; this never raises.

    Args:
        raw_text: Full descriptor text
        source: Optional label (usually the file path) kept on the Hero

    Returns:
        Parsed Hero

    Example:
        >>> hero = parse_hero("Alice:\\n  colouredName: &7Alice\\n")
        >>> hero.name, hero.coloured_name
        ('Alice', '&7Alice')
    """
    lines = split_lines(raw_text.rstrip())

    hero = Hero(
        schema_header=find_schema_header(lines),
        name=find_name(lines),
        coloured_name=find_coloured_name(lines),
        skills=find_skills(lines),
        source=source,
    )

    if hero.is_empty:
        logger.warning(f"[Parser] No fields found in {source or 'descriptor'}")
    else:
        missing = [
            field
            for field in ("schema_header", "name", "coloured_name", "skills")
            if getattr(hero, field) is None
        ]
        if missing:
            logger.debug(f"[Parser] {source or 'descriptor'} missing: {', '.join(missing)}")

    return hero
