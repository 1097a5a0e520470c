#!/usr/bin/env python3

from setuptools import setup
import os

directory = os.path.dirname(os.path.realpath(__file__))


if __name__ == "__main__":
    setup(
        name="ringcommand",
        packages=[
            "ringcommand",
            "ringcommand.core",
            "ringcommand.viewer",
        ],
        python_requires='>3.10.0',
        version="0.1.0",
        license="MIT",
        description="Gesture-driven ring selection menu controller",
        author="mirmik",
        author_email="mirmikns@yandex.ru",
        long_description=open(os.path.join(
            directory, "README.md"), "r", encoding="utf8").read(),
        long_description_content_type="text/markdown",
        keywords=["gesture", "menu", "animation", "xr"],
        classifiers=[],
        install_requires=[
            "numpy",
            "PyOpenGL>=3.1",
            "glfw>=2.5.0",
        ],
        extras_require={
            "test": ["pytest"],
        },
        zip_safe=False,
    )
