[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wrapbench"
version = "0.1.0"
description = "Small verification benchmark programs over wrapping 64-bit unsigned integers"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "verification", "uint64", "sorting", "graphs", "search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["wrapbench"]

[tool.pytest.ini_options]
addopts = "-ra"
