import setuptools

with open("README.md", "r") as readme:
    markdown_description = "".join(readme.readlines())

setuptools.setup(
    name="jsontint",
    version="0.3.0",
    description="Render JSON with terminal colors, falling back to plain JSON when color is off.",
    long_description=markdown_description,
    long_description_content_type="text/markdown",
    license="Apache License 2.0",
    classifiers=["License :: OSI Approved :: Apache Software License"],
    packages=setuptools.find_packages(include=["jsontint*"]),
    python_requires=">=3.8",
    install_requires=[
        # light_* colors and the module-level code tables arrived in termcolor 2.
        "termcolor>=2.1.0",
        "ruamel.yaml",
        # CLI:
        "argcomplete>=1.9.4",
    ],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=False,
    entry_points={
        "console_scripts": [
            "jsontint = jsontint.cli:main",
        ]
    },
)
