"""Test configuration and fixtures for strtab tests."""

from pathlib import Path

import pytest


DEFAULT_XML = """<?xml version="1.0" encoding="utf-8"?>
<resources>
    <string name="app_name" translatable="false">My App</string>
    <string name="welcome">Welcome, %1$s!</string>
    <string name="bye">Goodbye</string>
    <string name="quote">Say "cheese" &amp; smile</string>
</resources>
"""

FR_XML = """<?xml version="1.0" encoding="utf-8"?>
<resources>
    <string name="welcome">Bienvenue, %1$s !</string>
    <string name="bye">Au revoir</string>
</resources>
"""

DE_XML = """<?xml version="1.0" encoding="utf-8"?>
<resources>
    <string name="welcome">Willkommen, %1$s!</string>
</resources>
"""


def write_strings(res_dir: Path, folder: str, content: str) -> Path:
    """Write a strings.xml under res_dir/folder and return its path."""
    path = res_dir / folder / "strings.xml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def res_dir(tmp_path) -> Path:
    """Resource directory with values, values-fr and values-de."""
    res = tmp_path / "res"
    write_strings(res, "values", DEFAULT_XML)
    write_strings(res, "values-fr", FR_XML)
    write_strings(res, "values-de", DE_XML)
    return res


@pytest.fixture
def android_project(tmp_path) -> Path:
    """Android project root with resources under app/src/main/res."""
    project = tmp_path / "MyApp"
    res = project / "app" / "src" / "main" / "res"
    write_strings(res, "values", DEFAULT_XML)
    write_strings(res, "values-fr", FR_XML)
    return project
