[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spellwise"
version = "0.1.0"
description = "Interactive command-line spell checker with an editable word list and spelling suggestions"
requires-python = ">=3.10"
dependencies = []
keywords = ["spelling", "spell-checker", "dictionary", "suggestions", "hash-table", "binary-search-tree"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spellwise = "spellwise.checker:main"

[tool.hatch.build.targets.wheel]
packages = ["spellwise"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
