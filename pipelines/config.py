from __future__ import annotations

import pathlib

# Packaging
MAIN_PACKAGE = "buildmeta"
TEST_PACKAGE = "tests"

# Directories
ARTIFACT_DIRECTORY = "public"

# Linting and test configs
PYPROJECT_TOML = "pyproject.toml"
COVERAGE_HTML_PATH = pathlib.Path(ARTIFACT_DIRECTORY, "coverage", "html")

# Spell checking paths
SPELLCHECK_FILE_EXTS = (".py", ".pyi", ".toml", ".md", ".txt", ".cfg", ".ini", ".yml", ".yaml")
PYTHON_PATHS = (MAIN_PACKAGE, TEST_PACKAGE, "pipelines", "noxfile.py")
SPELLCHECK_PATHS = (
    *PYTHON_PATHS,
    *(str(f) for f in pathlib.Path.cwd().glob("*") if f.is_file() and f.suffix in SPELLCHECK_FILE_EXTS),
)
