from __future__ import annotations

from pathlib import Path

from setuptools import find_packages, setup


ROOT = Path(__file__).resolve().parent


def requirement_lines(filename: str) -> list[str]:
    """
    Requirement specifiers from a requirements file; comments and "-r" includes are skipped.
    """
    path = ROOT / filename
    if not path.exists():
        return []
    lines = (line.strip() for line in path.read_text(encoding="utf-8").splitlines())
    return [line for line in lines if line and not line.startswith(("#", "-r"))]


setup(
    name="courseview",
    version=(ROOT / "courseview" / "VERSION").read_text(encoding="utf-8").strip(),
    description="Course Explorer – load, filter, sort and browse JSON course catalogs (CLI + interactive)",
    long_description=(ROOT / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests",)),
    package_data={"courseview": ["VERSION"]},
    python_requires=">=3.9",
    install_requires=requirement_lines("requirements.txt"),
    extras_require={"dev": requirement_lines("requirements-dev.txt")},
    entry_points={"console_scripts": ["courseview=courseview.cli:main"]},
)
