from setuptools import setup, find_packages

version = open('VERSION').read().strip()

setup(
    name="wirecodec",
    version=version,
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"wirecodec": ["js/*.js"]},
    install_requires=["selenium>=4"],
    extras_require={
        "test": ["pytest"],
    },
    description="Translates Selenium JSON wire commands to the W3C "
    "WebDriver dialect.",
    license="MPL 2.0",
    keywords=["selenium", "webdriver", "w3c"],
    classifiers=[
        "Programming Language :: Python :: 3 :: Only",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Operating System :: POSIX",
        "Topic :: Software Development :: Testing",
        "Topic :: Internet :: WWW/HTTP :: Browsers"
    ],
)
