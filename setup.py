from setuptools import find_packages, setup

setup(
    name="mylists",
    version="0.1.0",
    description="A terminal task manager with task lists, summary counters and search.",
    author="vainilie",
    packages=find_packages(include=["mylists", "mylists.*"]),
    install_requires=[
        "textual>=0.86",
        "rich>=13.7",
        "pydantic>=2.6",
        "pydantic-settings>=2.2",
        "python-dateutil>=2.8",
        "emoji-data-python>=1.6",
        "timeago>=1.0.16",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "mylists=mylists.__main__:main",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
