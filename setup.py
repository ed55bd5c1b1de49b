from setuptools import setup, find_packages

setup(
    name="preferred-input",
    version="0.1.0",
    description="Detect and observe the user's preferred input device (mouse/keyboard, touch, gamepad)",
    author="mseibert",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    py_modules=["config", "main"],
    python_requires=">=3.10",
    install_requires=[
        "PyYAML>=6.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "preferred-input=main:main",
        ],
    },
)
