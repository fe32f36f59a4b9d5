from setuptools import find_packages, setup

setup(
    name="isilon-mount",
    version="0.1.0",
    description="Mount a CU Anschutz Isilon CIFS/SMB share under ~/mnt on macOS or Linux",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[],
    entry_points={
        "console_scripts": [
            "isilon-mount=isilon_mount.__main__:main",
        ],
    },
    python_requires=">=3.10",
    extras_require={
        "dev": [
            "pytest",
            "build",
            "twine",
        ],
    },
)
