[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dot11kit"
version = "0.1.0"
description = "Parse radiotap capture headers and check MAC addresses against known 802.11 vendor prefixes"
requires-python = ">=3.10"
dependencies = []
keywords = ["802.11", "wifi", "wlan", "radiotap", "mac", "vendor"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dot11kit-radiotap-dump = "dot11kit.radiotap_dump:main"

[tool.hatch.build.targets.wheel]
packages = ["dot11kit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
