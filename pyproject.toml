[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "swiftpro_arm"
version = "0.1.0"
description = "Kinematics, G-code commands and position reports for the uArm Swift Pro desktop robot arm"
requires-python = ">=3.10"
dependencies = [
    "pyserial",
]
keywords = ["robot arm", "swift pro", "kinematics", "g-code", "serial"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["swiftpro_arm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
