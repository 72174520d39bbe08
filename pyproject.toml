[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coinfeed"
version = "1.0.0"
description = "Websocket market data listener for the Coinbase Advanced Trade feed, with level-3 message types and subscription requests."
requires-python = ">=3.10"
dependencies = [
    "websockets",
]
keywords = ["coinbase", "market data", "websocket", "feed handler", "trading"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
coinfeed-listen = "coinfeed.client:main"

[tool.hatch.build.targets.wheel]
packages = ["coinfeed"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
