from setuptools import setup, find_packages

setup(
    name="film-studio",
    version="1.0.0",
    description="AI Film Studio: storyboard and 3D model generation front end",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["app"],
    include_package_data=True,
    install_requires=[
        "streamlit>=1.29",
        "python-dotenv",
        "pydantic>=2",
        "openai",
        "openai-agents",
        "google-generativeai"
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.9",
)
