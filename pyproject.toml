[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linsl"
version = "0.1.0"
description = "A small interpreter for a Lisp/Scheme-like language with a minimal set of primitives"
requires-python = ">=3.10"
dependencies = []
keywords = ["lisp", "scheme", "interpreter", "repl", "lambda"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linsl = "linsl.repl:main"

[tool.hatch.build.targets.wheel]
packages = ["linsl"]

[tool.pytest.ini_options]
addopts = "-ra"
