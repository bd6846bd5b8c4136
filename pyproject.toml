[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "olio"
version = "0.1.0"
description = "A small ray tracer with Phong shading for raytra scene files"
requires-python = ">=3.10"
keywords = ["ray tracing", "rendering", "phong", "graphics", "raytra"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pillow",
    "tqdm",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
olio-rtbasic = "olio.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["olio"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
