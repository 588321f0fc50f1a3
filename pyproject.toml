[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursekit"
version = "0.1.0"
description = "Small command-line tools: patient list, bounded polynomial list, C declaration explainer, CRC/Hamming/parity encoders and measurement uncertainty"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "crc",
    "hamming-code",
    "parity",
    "c-declarations",
    "polynomial",
    "measurement-uncertainty",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coursekit-patients = "coursekit.patients:main"
coursekit-polylist = "coursekit.polylist:main"
coursekit-cdecl = "coursekit.cdecl:main"
coursekit-crc = "coursekit.crc:main"
coursekit-hamming = "coursekit.hamming:main"
coursekit-parity = "coursekit.parity:main"
coursekit-uncertainty = "coursekit.uncertainty:main"

[tool.hatch.build.targets.wheel]
packages = ["coursekit"]

[tool.hatch.build.targets.sdist]
include = ["coursekit", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
