from setuptools import setup, find_packages

setup(
    name="kmp_matcher",
    version="0.1.0",
    description="Knuth-Morris-Pratt pattern matching with a test-case runner and benchmarks",
    packages=find_packages(include=["kmp_matcher", "kmp_matcher.*"]),
    package_data={"kmp_matcher.config": ["matcher.conf"]},
    python_requires=">=3.8",
    install_requires=[
        "psutil>=5.9.0",
        "pandas>=1.5.0",
        "matplotlib>=3.6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "kmp-matcher=kmp_matcher.runner:main",
        ],
    },
)
