from setuptools import find_packages, setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="PyNewton",
    version="0.0.1",
    description="Newton interpolating polynomials for area estimates of sampled data, e.g., free energy differences.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["scipy_newton", "scipy_newton.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=["numpy", "scipy", "matplotlib"],
    extras_require={"test": ["pytest"]},
)
