[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "avrokit"
version = "0.1.0"
description = "Buffered reader for primitive values in the Avro binary encoding"
requires-python = ">=3.10"
dependencies = []
keywords = ["avro", "serialization", "binary", "decoder", "zigzag", "varint"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["avrokit"]

[tool.pytest.ini_options]
addopts = "-ra"
