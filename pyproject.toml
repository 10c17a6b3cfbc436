[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nsoneapi"
version = "0.1.0"
description = "Service objects for a managed DNS REST API: zones, records, TSIG keys, Pulsar jobs, QPS statistics and DHCP resources"
requires-python = ">=3.10"
dependencies = []
keywords = ["dns", "rest", "api", "zones", "records", "tsig", "dhcp", "pulsar"]
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
    "Topic :: Internet :: Name Service (DNS)",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nsoneapi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
