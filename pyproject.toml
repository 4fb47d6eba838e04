[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zeeedit"
version = "0.1.0"
description = "MIDI control-change editor model for the Prophet-5 synthesizer: parameter map, panel layout and MIDI routing"
requires-python = ">=3.10"
dependencies = []
keywords = ["midi", "synthesizer", "prophet-5", "control-change", "editor", "midi-effect"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zeeedit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
