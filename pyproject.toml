[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "svgnative"
version = "0.1.0"
description = "Building blocks for rendering SVG Native documents: CSS colour keywords, a style model, a small XML tree, image helpers and a text renderer"
requires-python = ">=3.10"
keywords = ["svg", "svg-native", "rendering", "vector-graphics", "css-colors", "xml"]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["svgnative"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
