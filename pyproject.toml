[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "autocorrect"
version = "1.0.0"
description = "Correct spaces and punctuation between CJK (Chinese, Japanese, Korean) and half-width text."
requires-python = ">=3.10"
dependencies = [
    "regex",
]
keywords = [
    "cjk",
    "chinese",
    "japanese",
    "korean",
    "copywriting",
    "linter",
    "formatter",
    "typography",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Chinese (Simplified)",
    "Natural Language :: Chinese (Traditional)",
    "Natural Language :: Japanese",
    "Natural Language :: Korean",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
    "Topic :: Software Development :: Quality Assurance",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["autocorrect"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
