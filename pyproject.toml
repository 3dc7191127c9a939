[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcroasm"
version = "0.1.0"
description = "Macro pre-assembler that expands mcro/mcroend blocks in assembly source files"
requires-python = ">=3.10"
dependencies = []
keywords = ["assembler", "macro", "pre-assembler", "preprocessor"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Assemblers",
    "Topic :: Software Development :: Pre-processors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mcroasm = "mcroasm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mcroasm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
