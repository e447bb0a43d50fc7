from importlib.machinery import SourceFileLoader
from pathlib import Path
from types import ModuleType

from setuptools import find_packages, setup


loader = SourceFileLoader("gocpp", "./src/gocpp/__init__.py")
gocpp = ModuleType(loader.name)
loader.exec_module(gocpp)

setup(
    name="gocpp",
    version=gocpp.__version__,  # type: ignore
    description="Compile, run and clean up single C++ files in one command.",
    long_description=(Path(__file__).parent / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_packages("src", exclude=["tests"]),
    package_data={"gocpp": ["data/*.cpp"]},
    entry_points={"console_scripts": ["gocpp=gocpp.cli:main"]},
    install_requires=["appdirs", "cyclopts>=4", "pydantic>=2", "PyYAML", "rich"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Programming Language :: C++",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Compilers",
    ],
)
