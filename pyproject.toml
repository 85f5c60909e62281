[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flashgo"
version = "0.1.0"
description = "Animation engine for an 8x8 RGB LED matrix, driven over a simulated BLE link"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["led", "matrix", "animation", "ble", "rainbow", "protobuf", "simulator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
flashgo = "flashgo.orchestrator:main"

[tool.hatch.build.targets.wheel]
packages = ["flashgo"]

[tool.hatch.build.targets.sdist]
include = ["flashgo", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
