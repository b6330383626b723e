"""Global fixtures for herocombiner tests."""

import pytest

from herocombiner.core.models import Hero


SCHEMA_LINE = "# yaml-language-server: $schema=../schema/hero.json"


def make_descriptor(name: str, coloured_name: str, skills: list[str]) -> str:
    skill_lines = "".join(f"    - {skill}\n" for skill in skills)
    return (
        f"{SCHEMA_LINE}\n"
        f"{name}:\n"
        f"  colouredName: {coloured_name}\n"
        f"  description: The one and only {name}\n"
        f"  skills:\n"
        f"{skill_lines}"
    )


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config file at a temp location for every test."""
    path = tmp_path / "config" / "config.yaml"
    monkeypatch.setenv("HEROCOMBINER_CONFIG", str(path))
    return path


@pytest.fixture
def alice_text():
    return make_descriptor("Alice", "&7Alice", ["Fireball", "Blink"])


@pytest.fixture
def sample_heroes():
    """Three fully populated heroes."""
    return [
        Hero(
            schema_header=SCHEMA_LINE,
            name=name,
            coloured_name=f"&7{name}",
            skills=f"    - {name}Strike",
        )
        for name in ("Xena", "Yuri", "Zed")
    ]


@pytest.fixture
def descriptor_files(tmp_path):
    """Three descriptor files on disk, in X, Y, Z order."""
    directory = tmp_path / "heroes"
    directory.mkdir()
    paths = []
    for name, skill in (("Xena", "Slash"), ("Yuri", "Heal"), ("Zed", "Shadow")):
        path = directory / f"{name.lower()}.yml"
        path.write_text(make_descriptor(name, f"&7{name}", [skill]), encoding="utf-8")
        paths.append(path)
    return paths
