[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wiremap"
version = "0.1.0"
description = "Height maps, rotation matrices, colour-graded line drawing and an in-memory display, image and XPM toolkit"
requires-python = ">=3.10"
dependencies = []
keywords = ["wireframe", "heightmap", "xpm", "rendering", "graphics"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wiremap"]

[tool.pytest.ini_options]
addopts = "-ra"
