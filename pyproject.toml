[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "citadelle"
version = "0.1.0"
description = "Simulated Kyber-512 key encapsulation with a small demo command"
requires-python = ">=3.10"
dependencies = []
keywords = ["kem", "kyber", "key-exchange", "post-quantum", "simulation"]
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
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
citadelle = "citadelle.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["citadelle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
