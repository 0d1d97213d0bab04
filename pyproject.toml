[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yamlls"
version = "0.1.0"
description = "Editor-support building blocks for YAML: positions, document store, anchor completion helpers, folding, diagnostics and range edits"
requires-python = ">=3.10"
dependencies = ["pyyaml"]
keywords = ["yaml", "lsp", "language-server", "editor", "anchors", "folding", "diagnostics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors :: Integrated Development Environments (IDE)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["yamlls"]

[tool.pytest.ini_options]
addopts = "-ra"
