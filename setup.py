from setuptools import find_packages, setup

with open("README.md", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pyupsample",
    version="0.0.1",
    description="Taichi-accelerated bilinear and six-tap (SOI) raster upsampling",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["pyupsample", "pyupsample.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Image Processing",
        "Topic :: Multimedia :: Graphics",
    ],
    python_requires=">=3.9",
    install_requires=[
        "taichi>=1.4.0",
        "numpy>=1.20.0",
        "click>=7.0",
        "pillow>=9.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
    },
    keywords="upsampling interpolation bilinear h264 sub-pixel taichi",
    entry_points={
        "console_scripts": [
            "pyu-upsample=pyupsample.cli.upsample_commands:raster_upsample",
        ],
    },
)
