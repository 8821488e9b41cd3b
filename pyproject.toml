[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinynet"
version = "0.1.0"
description = "A small fully connected feed-forward neural network trained by backpropagation with momentum"
requires-python = ">=3.10"
dependencies = []
keywords = ["neural network", "backpropagation", "machine learning", "tanh", "momentum"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinynet = "tinynet.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tinynet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
