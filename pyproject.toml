[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snarknode"
version = "0.1.0"
description = "Node environment profiles, sync decision logic and small helpers for a peer-to-peer ledger node"
requires-python = ">=3.10"
dependencies = []
keywords = ["blockchain", "peer-to-peer", "sync", "ledger", "node"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["snarknode"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
