from setuptools import setup, find_packages

setup(
    name="int_maxheap",
    version="0.1.0",
    packages=find_packages(),
    install_requires=[
        "numpy",
        "jaxtyping",
        "regex",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "int-maxheap = int_maxheap.Menu.menu:main",
        ],
    },
    zip_safe=False,
)
