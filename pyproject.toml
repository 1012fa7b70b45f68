[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chesswire"
version = "0.2.0"
description = "Chess core types, Zobrist hashing keys and an asyncio game-event broadcast layer"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "bitboard", "zobrist", "events", "asyncio"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Framework :: AsyncIO",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["chesswire"]

[tool.pytest.ini_options]
addopts = "-ra"
