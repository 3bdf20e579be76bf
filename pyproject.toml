[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fairflow"
version = "0.1.0"
description = "Feedback-driven payroll ledger: companies, teams, employees, peer ratings and salary payouts from a treasury"
requires-python = ">=3.10"
keywords = ["payroll", "salary", "feedback", "treasury", "ledger"]
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
    "Topic :: Office/Business :: Financial :: Accounting",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fairflow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
