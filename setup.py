from setuptools import setup, find_packages

setup(
    name="aro-utils",
    version="0.1.0",
    description="Azure Red Hat OpenShift deployment utilities: scale set cleanup, gateway probe reconciliation and AppLens detectors",
    author="ARO Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "azure-core>=1.30.0",
        "azure-identity>=1.12.0",
        "azure-mgmt-compute>=30.0.0",
        "prefect>=3.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
