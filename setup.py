"""
Twilio Proxy Python Client - Setup

Phone number management for Twilio Proxy services.
"""

from setuptools import setup, find_packages
import os
import re

# Read the README
here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

# Read version without importing the package
with open(os.path.join(here, "twilio_proxy", "__init__.py"), encoding="utf-8") as f:
    version = re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)

setup(
    name="twilio-proxy-numbers",
    version=version,
    description="Python client for the phone numbers of Twilio Proxy services",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["twilio_proxy", "twilio_proxy.*"]),
    python_requires=">=3.8",
    install_requires=[
        "httpx>=0.24.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
            "mypy>=1.0",
            "black>=23.0",
            "ruff>=0.0.270",
            "respx>=0.20",
        ],
    },
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Communications :: Telephony",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Typing :: Typed",
    ],
    keywords=[
        "twilio",
        "proxy",
        "telephony",
        "phone-numbers",
    ],
    package_data={
        "twilio_proxy": ["py.typed"],
    },
    zip_safe=False,
)
