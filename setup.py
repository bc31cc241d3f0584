from setuptools import setup, find_packages

# Read long description from README
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="transcriptkit",
    version="0.1.0",
    author="TranscriptKit Contributors",
    description="YouTube transcript retrieval with multi-path caption fallback and a small web front end",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/transcriptkit/transcriptkit",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    package_data={
        "transcriptkit.web": ["templates/*.html"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Framework :: Flask",
        "Topic :: Multimedia :: Video",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.8",
    install_requires=[
        "requests>=2.28.0",
        "yt-dlp>=2023.0.0",
        "flask>=2.2.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "transcriptkit-web=transcriptkit.web.app:main",
        ],
    },
    include_package_data=True,
    keywords="youtube transcript captions subtitles timedtext innertube",
    project_urls={
        "Bug Reports": "https://github.com/transcriptkit/transcriptkit/issues",
        "Source": "https://github.com/transcriptkit/transcriptkit",
        "Documentation": "https://github.com/transcriptkit/transcriptkit#readme",
    },
)
