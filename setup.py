from pathlib import Path

from setuptools import find_packages, setup

BASE_DIR = Path(__file__).parent
README = (BASE_DIR / "README.md").read_text(encoding="utf-8")

setup(
    name="devops-demo-app",
    version="1.0.0",
    description="FastAPI demo app showing the server time and process health.",
    long_description=README,
    long_description_content_type="text/markdown",
    author="DevOps Demo",
    packages=find_packages(include=["demo_app", "demo_app.*"]),
    python_requires=">=3.9",
    include_package_data=True,
    package_data={
        "demo_app": ["templates/*.html", "public/*/*"],
    },
    install_requires=[
        "fastapi>=0.115.0",
        "uvicorn[standard]>=0.32.0",
        "jinja2>=3.1.0",
        "psutil>=5.9.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "httpx>=0.27.0",
            "requests>=2.32.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "devops-demo-app=demo_app.main:main",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
