[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "emotionengine"
version = "0.1.0"
description = "Valence-arousal emotion model: polar coordinate ranges, emotion zones and a hierarchical emotion tag registry"
requires-python = ">=3.10"
dependencies = []
keywords = ["emotion", "valence", "arousal", "polar coordinates", "tags"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["emotionengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
