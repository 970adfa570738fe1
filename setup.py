"""Packaging for epomo.

Install for development:
    pip install -e .[test]

Build a macOS .app bundle:
    pip install py2app
    python setup.py py2app
"""

import sys

from setuptools import setup, find_packages

# macOS bundle metadata
BUNDLE_PLIST = {
    "CFBundleName": "epomo",
    "CFBundleIdentifier": "com.epomo.app",
    "CFBundleShortVersionString": "0.1.0",
}

# py2app only exists on macOS; pull it in just for bundle builds
py2app_kwargs = {}
if "py2app" in sys.argv:
    py2app_kwargs = {
        "app": ["main.py"],
        "options": {"py2app": {"plist": BUNDLE_PLIST}},
        "setup_requires": ["py2app"],
    }

setup(
    name="epomo",
    version="0.1.0",
    description="A small desktop Pomodoro timer",
    packages=find_packages(include=["epomo", "epomo.*"]),
    python_requires=">=3.10",
    install_requires=["PyQt6>=6.4"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"gui_scripts": ["epomo = epomo.__main__:main"]},
    **py2app_kwargs,
)
