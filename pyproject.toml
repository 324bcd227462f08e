[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sarcshop"
version = "0.1.0"
description = "Terminal shop admin panel with AVL-tree inventory, coupons, UPI payment QR codes and delivery routes"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "shop",
    "point-of-sale",
    "inventory",
    "avl-tree",
    "dijkstra",
    "kmp",
    "upi",
    "terminal",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sarcshop = "sarcshop.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sarcshop"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
