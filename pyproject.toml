[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "inventory-utils"
version = "0.3.1"
description = "Parse, validate and repair EAN-13 and UPC-A barcodes"
requires-python = ">=3.10"
dependencies = []
keywords = ["ean13", "upc", "upc-a", "barcode", "inventory", "check digit"]
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
    "Topic :: Office/Business",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["inventory_utils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
