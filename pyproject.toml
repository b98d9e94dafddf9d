[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fixed8"
version = "1.0.0"
description = "A fixed-point number type with 8 fractional bits, 2D points and a point-in-triangle test"
requires-python = ">=3.10"
dependencies = []
keywords = ["fixed-point", "arithmetic", "geometry", "triangle", "bsp"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fixed8-demo = "fixed8.demo:main"
fixed8-operators = "fixed8.operators_demo:main"
fixed8-triangle = "fixed8.triangle_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["fixed8"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
