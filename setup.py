"""Setup configuration for godirs - Go Source Directory Scanner."""

from setuptools import setup, find_packages
import os
import re

HERE = os.path.dirname(__file__)


def read_requirements():
    """Return the runtime dependencies of godirs (typer, rich) listed in requirements.txt.

    Blank lines and comment lines are skipped.
    """
    with open(os.path.join(HERE, "requirements.txt"), "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip() and not line.startswith("#")]


def read_readme():
    """Return the godirs README used as the PyPI long description, or "" if absent."""
    readme_path = os.path.join(HERE, "README.md")
    if not os.path.exists(readme_path):
        return ""
    with open(readme_path, "r", encoding="utf-8") as f:
        return f.read()


def read_version():
    """Return the version string the CLI reports with --version.

    godirs/cli.py holds the only __version__ the build reads.

    Raises:
        RuntimeError: If godirs/cli.py assigns no __version__.
    """
    with open(os.path.join(HERE, "godirs", "cli.py"), "r", encoding="utf-8") as f:
        match = re.search(r'^__version__\s*=\s*["\']([^"\']+)["\']', f.read(), re.MULTILINE)
    if match is None:
        raise RuntimeError("Unable to find __version__ in godirs/cli.py")
    return match.group(1)


setup(
    name="godirs",
    version=read_version(),
    description="Lazy, cached, breadth-first scanner of Go source directories under GOROOT and GOPATH",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    author="godirs Team",
    license="MIT",
    python_requires=">=3.9",
    install_requires=read_requirements(),
    extras_require={
        "test": ["pytest>=7.0"],
    },
    packages=find_packages(exclude=["tests", "tests.*"]),
    entry_points={
        "console_scripts": [
            "godirs=godirs.cli:app",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Documentation",
        "Topic :: Utilities",
    ],
    keywords="go gopath goroot source-directories scanner",
)
