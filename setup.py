from pathlib import Path
from setuptools import setup, find_packages

BASE_DIR = Path(__file__).parent

# ----------------------------------------------------------------------
# Core version & requirements
# ----------------------------------------------------------------------
version = (BASE_DIR / ".version").read_text().strip()
long_description = (BASE_DIR / "README.md").read_text(encoding="utf-8")
requirements = [
    line.strip()
    for line in (BASE_DIR / "requirements.txt").read_text().splitlines()
    if line.strip() and not line.startswith("#")
]

# ----------------------------------------------------------------------
# Extras handling
# ----------------------------------------------------------------------
extras = {
    "test": ["pytest"],
}

# ----------------------------------------------------------------------
setup(
    name="hungarian-validators",
    version=version,
    description="Checksum and format validators for Hungarian tax (adóazonosító) "
    "and social security (TAJ) numbers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="Apache-2.0",
    packages=find_packages(
        where=".",
        include=["hungarian_validators*"],
        exclude=("tests", "docs"),
    ),
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require=extras,
)
