[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enclaveregistry"
version = "0.1.0"
description = "In-memory enclave and cluster registry with runtime constants, fee splitting and call weights"
requires-python = ">=3.10"
dependencies = []
keywords = ["enclave", "cluster", "registry", "runtime", "weights", "fees", "staking"]
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
    "Topic :: System :: Distributed Computing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["enclaveregistry"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
