"""
Randomly - Microsoft Teams bot that picks a random teammate.

Components:
- Selector (uniform random pick of a conversation member)
- Announcement card rendering (Jinja2 Adaptive Card template)
- Bot Framework turn handler and FastAPI webhook
"""

from setuptools import setup, find_packages

setup(
    name="randomly_bot",
    version="1.0.0",
    description="Teams bot that picks a random member of a group chat or team",
    author="The Randomly Team",
    packages=find_packages(include=["randomly_bot", "randomly_bot.*"]),
    package_data={"randomly_bot.app": ["Cards/*.j2"]},
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "botbuilder-core>=4.14.0",
        "botbuilder-schema>=4.14.0",
        "botframework-connector>=4.14.0",
        "fastapi>=0.104.0",
        "uvicorn>=0.24.0",
        "pydantic>=2.5.0",
        "python-dotenv>=1.0.0",
        "jinja2>=3.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
            "httpx>=0.26.0",
        ],
    },
)
