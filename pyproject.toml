[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "neuranet"
version = "0.1.0"
description = "A small fully connected neural network with feed-forward, MSE cost and back-propagation in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["neural network", "backpropagation", "machine learning", "matrix"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
neuranet = "neuranet.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["neuranet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
