[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "geometria"
version = "0.1.0"
description = "Geometry, easing, event and camera-frustum utilities for small graphics applications"
requires-python = ">=3.10"
keywords = ["geometry", "easing", "frustum", "observer", "events", "2d", "plane"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["geometria"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
