[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hairstrands"
version = "0.1.0"
description = "Load hair strand data files, flatten them into particle arrays and line-strip meshes, and compute fly-through camera matrices."
requires-python = ">=3.10"
dependencies = []
keywords = ["hair", "strands", "rendering", "vector math", "camera", "mesh"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hairstrands = "hairstrands.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hairstrands"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
