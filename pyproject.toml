[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "valhalla"
version = "0.1.0"
description = "Building blocks for classic MMORPG servers: packet codec, client stream cipher, game data extraction and character-select encodings."
requires-python = ">=3.11"
dependencies = [
    "cryptography",
]
keywords = ["mmorpg", "game-server", "packets", "cipher", "game-data"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["valhalla"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
