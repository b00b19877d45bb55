[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "softray"
version = "0.1.0"
description = "A small software ray tracer with spheres, triangles, boxes, textures, volumes and BVH acceleration"
requires-python = ">=3.10"
keywords = ["ray tracing", "rendering", "graphics", "path tracing", "software renderer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
softray = "softray.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["softray"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
