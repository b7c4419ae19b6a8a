[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "gw2dat"
version = "1.0.9"
description = "Record layouts, file-type categorization, hex dumps and channel masking for Guild Wars 2 .dat archive contents"
requires-python = ">=3.10"
dependencies = []
keywords = ["gw2", "dat", "archive", "file-format", "hexdump", "texture"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: File Formats",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["gw2dat*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
