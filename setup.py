from setuptools import setup, find_packages

setup(
    name="school-connect",
    version="0.1.0",
    description="School Connect API server and Python client",
    package_dir={
        "school_connect": "backend/school_connect",
        "school_connect_client": "client/school_connect_client",
    },
    packages=find_packages("backend") + find_packages("client"),
    install_requires=[
        "fastapi",
        "uvicorn",
        "pydantic>=2",
        "pydantic-settings",
        "python-dotenv",
        "httpx",
        "bcrypt",
        "mangum",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    python_requires=">=3.8",
)
