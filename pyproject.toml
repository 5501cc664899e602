[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "barcodegen"
version = "0.1.0"
description = "Pure Python encoders for Codabar, Code 128, Code 39, Code 93, EAN and Data Matrix barcodes."
requires-python = ">=3.10"
dependencies = []
keywords = ["barcode", "datamatrix", "code128", "code39", "code93", "codabar", "ean", "reed-solomon"]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["barcodegen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
