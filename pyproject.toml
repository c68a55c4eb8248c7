[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelprison"
version = "0.1.0"
description = "Animated main menu for the Pixel Prison game, with mouse and keyboard navigation"
requires-python = ">=3.10"
keywords = ["game", "menu", "pygame", "pixel"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixelprison = "pixelprison.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelprison"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
