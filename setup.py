from setuptools import setup, find_packages

setup(
    name="kolibrium",
    version="0.9.0",
    description="A fluent configuration layer for Selenium WebDriver: browser setup, locators, waits and page flows",
    author="Kolibrium Developers",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "selenium>=4.10.0",
        "webdriver-manager>=3.5.2",
        "chevron>=0.14.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'kolibrium=kolibrium.__main__:main',
        ],
        'pytest11': [
            'kolibrium=kolibrium.pytest_plugin',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Framework :: Pytest",
    ],
    python_requires=">=3.9",
)
