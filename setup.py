#!/usr/bin/env python3
"""
Setup script for cf-notice package.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="cf-notice",
    version="1.0.0",
    author="cf-notice Team",
    author_email="team@example.com",
    description="Detect and report DNS record changes for Cloudflare zones",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/example/cf-notice",
    packages=find_packages(include=["cf_notice", "cf_notice.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Internet :: Name Service (DNS)",
        "Topic :: System :: Monitoring",
    ],
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={
        "test": ["behave>=1.2.6"],
    },
    entry_points={
        "console_scripts": [
            "cf-notice=cf_notice.cli.main:main",
        ],
    },
)
