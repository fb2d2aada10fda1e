[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "icyisland"
version = "0.1.0"
description = "Game logic for a small side-scrolling platformer: timers, bitmap text layout, tiles, world-map movement, and tools that embed resources as C source"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["game", "platformer", "worldmap", "tiles", "resources", "rgb565"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
icyisland-resmaker = "icyisland.resmaker:main"
icyisland-scanner = "icyisland.scanner:main"

[tool.hatch.build.targets.wheel]
packages = ["icyisland"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
