[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lnpkg"
version = "0.1.0"
description = "Bundle a Node.js project and the node runtime into a single native executable"
requires-python = ">=3.10"
dependencies = []
keywords = ["nodejs", "packaging", "bundler", "executable", "build"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lnpkg = "lnpkg.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lnpkg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
