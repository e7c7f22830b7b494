[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simplechess"
version = "0.1.0"
description = "A small chess engine with FEN parsing, legal move generation and a self-playing game loop"
requires-python = ">=3.10"
keywords = ["chess", "fen", "move-generation", "bitboard"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
simplechess = "simplechess.cli:main"
simplechess-bitboards = "simplechess.bitboards:main"

[tool.hatch.build.targets.wheel]
packages = ["simplechess"]

[tool.pytest.ini_options]
addopts = "-ra"
