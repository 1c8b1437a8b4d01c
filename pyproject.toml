[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dupreport"
version = "0.1.0"
description = "Bug report model, report reader, TF-IDF collections, cosine similarity measures and a RankNet training loop for duplicate bug report retrieval"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bug reports",
    "duplicate detection",
    "information retrieval",
    "tf-idf",
    "cosine similarity",
    "ranknet",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Bug Tracking",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dupreport"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
