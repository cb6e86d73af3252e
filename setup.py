from setuptools import setup, find_packages


setup(
    name="richcardsbot",
    version="0.1.0",
    description="Bot Framework bot that answers a card choice with rich card attachments",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "botbuilder-core>=4.16.0",
        "botbuilder-dialogs>=4.16.0",
        "botbuilder-schema>=4.16.0",
        "aiohttp>=3.8",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "typer>=0.12.0",
        "fastapi>=0.111.0",
        "uvicorn[standard]>=0.30.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "httpx>=0.27.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "richcardsbot=richcardsbot.cli:app",
            "richcardsbot-server=richcardsbot.server:main",
        ]
    },
    python_requires=">=3.10",
)
