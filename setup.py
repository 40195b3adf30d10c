from setuptools import setup, find_packages

setup(
    name="openapi-to-mock",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "pyyaml>=6.0",
        "pydantic>=2.0",
        "typer>=0.9",
        "jsonschema>=4.0",
        "openapi-spec-validator>=0.7",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["openapi-to-mock=openapi_to_mock.cli:main"],
    },
    description="Convert Swagger 2.0/OpenAPI 3.x specifications to and from mock server environments",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.8",
)
