"""Setup script for the Calendar Page package."""

from pathlib import Path

from setuptools import find_packages, setup
from setuptools.command.develop import develop
from setuptools.command.install import install


def post_install_setup():
    """Create the user configuration directory and point at the example config."""
    config_dir = Path.home() / ".config" / "calendarpage"
    try:
        config_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print(f"Warning: could not create {config_dir}: {e}")
        return

    if not (config_dir / "config.yaml").exists():
        print("\n" + "=" * 60)
        print("Calendar Page Installation Complete!")
        print("=" * 60)
        print(f"Configuration directory: {config_dir}")
        print("Copy config/config.yaml.example there as config.yaml to change defaults.")
        print("Run 'calendarpage --help' to see all available options")
        print("=" * 60)


class PostInstallCommand(install):
    """Custom install command with post-install setup."""

    def run(self):
        install.run(self)
        post_install_setup()


class PostDevelopCommand(develop):
    """Custom develop command with post-install setup."""

    def run(self):
        develop.run(self)
        post_install_setup()


readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

# Read requirements, routing test tooling to the dev extra
requirements_file = Path(__file__).parent / "requirements.txt"
requirements = []
dev_requirements = []

if requirements_file.exists():
    for line in requirements_file.read_text().strip().split("\n"):
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "pytest" in line:
            dev_requirements.append(line)
        else:
            requirements.append(line)

setup(
    name="calendarpage",
    version="1.0.0",
    description="Calendar page controller for date-picker widgets",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="CalendarPage Team",
    author_email="support@calendarpage.local",
    packages=find_packages(exclude=["tests*", "docs*"]),
    include_package_data=True,
    install_requires=requirements,
    extras_require={
        "dev": dev_requirements,
        "test": dev_requirements,
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: User Interfaces",
    ],
    keywords="calendar datepicker month-picker quarter-picker keyboard-navigation",
    entry_points={
        "console_scripts": [
            "calendarpage=calendarpage.__main__:main",
        ],
    },
    package_data={
        "calendarpage": ["py.typed"],
    },
    cmdclass={
        "install": PostInstallCommand,
        "develop": PostDevelopCommand,
    },
    zip_safe=False,
)
