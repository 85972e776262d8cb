from setuptools import find_packages, setup

with open("README.md", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pynoisemap",
    version="0.1.0",
    author="pynoisemap developers",
    description="Seeded gradient, simplex, value and white noise fields with fractal compositing",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering",
        "Topic :: Multimedia :: Graphics",
    ],
    python_requires=">=3.9",
    install_requires=[
        "taichi>=1.6.0",
        "numpy>=1.20.0",
        "matplotlib>=3.5.0",
        "click>=7.0",
        "pillow>=8.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
    },
    keywords="procedural noise perlin simplex value fractal fbm taichi",
    entry_points={
        "console_scripts": [
            "pnm-generate=pynoisemap.cli.generate_commands:generate",
            "pnm-noise2png=pynoisemap.cli.noise2png_commands:noise2png",
        ],
    },
)
