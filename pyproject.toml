[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minilab"
version = "0.1.0"
description = "A small workbench of toy programs: a pseudo-3D falling-ball scene, a 2D physics sandbox, an interactive key-value store and a single-page web server."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = [
    "simulation",
    "physics",
    "projection",
    "key-value",
    "http-server",
    "pygame",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Other/Nonlisted Topic",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
minilab-engine3d = "minilab.engine3d.app:main"
minilab-physics = "minilab.physics.app:main"
minilab-kv = "minilab.kvstore.cli:main"
minilab-web = "minilab.webserver.server:main"

[tool.hatch.build.targets.wheel]
packages = ["minilab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
