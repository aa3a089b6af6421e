[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kanatype"
version = "0.1.0"
description = "A falling-word typing game that drills Japanese vocabulary from an Anki deck"
requires-python = ">=3.10"
keywords = ["anki", "japanese", "hiragana", "romaji", "typing", "game", "vocabulary"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Education",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
kanatype = "kanatype.app:main"

[tool.hatch.build.targets.wheel]
packages = ["kanatype"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
