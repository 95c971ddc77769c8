[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hmmeval"
version = "0.1.0"
description = "Hidden Markov model state prediction with Viterbi and forward-backward, scored by per-state confusion statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["hmm", "hidden markov model", "viterbi", "forward-backward", "f-measure", "confusion matrix"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hmmeval = "hmmeval.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hmmeval"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
