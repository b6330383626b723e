"""Synthesizing a combined hero descriptor from a group of heroes.

Missing fields render as empty strings, so a group with gaps still produces
a complete (if odd looking) descriptor.
"""

from collections.abc import Sequence

from ..core.models import Hero, SynthesizedHero


NAME_SEPARATOR = "And"
COLOURED_NAME_SEPARATOR = " + "
FILE_EXTENSION = ".yml"


def _text(value: str | None) -> str:
    return value if value is not None else ""


def combined_name(heroes: Sequence[Hero]) -> str:
    """Hero names glued with 'And', e.g. 'AliceAndBob'."""
    return NAME_SEPARATOR.join(_text(hero.name) for hero in heroes)


def describe_combination(heroes: Sequence[Hero]) -> str:
    """Build the description line for a group.

    Every name but the last is followed by ', ', so two heroes read
    "A combination of X, and Y".
    """
    coloured_names = [_text(hero.coloured_name) for hero in heroes]
    name_list = "".join(f"{name}, " for name in coloured_names[:-1])
    name_list += f"and {coloured_names[-1]}"
    return f"A combination of {name_list}"


def combine_heroes(heroes: Sequence[Hero]) -> SynthesizedHero:
    """Synthesize one descriptor for a group of two or more heroes.

    The schema header comes from the first hero; skills blocks are stacked
    in group order.
    """
    name = combined_name(heroes)
    coloured_name = COLOURED_NAME_SEPARATOR.join(_text(hero.coloured_name) for hero in heroes)
    description = describe_combination(heroes)
    skills = "\n".join(_text(hero.skills) for hero in heroes) + "\n"
    schema = _text(heroes[0].schema_header)

    content = (
        f"{schema}\n"
        f"{name}: \n"
        f"  colouredName: {coloured_name}\n"
        f"  description: {description}\n"
        f"  skills: \n"
        f"{skills}"
    )
    return SynthesizedHero(file_name=name + FILE_EXTENSION, content=content)
