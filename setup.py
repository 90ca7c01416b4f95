from setuptools import find_packages, setup

setup(
    name="agentlink",
    version="0.1.0",
    description="Install a shared AGENT.md for Claude Code and Gemini CLI via symlinks",
    author="William Wieselquist",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.12,<0.16",  # CLI framework, on the click package below
        "click>=8.1",  # Usage errors raised through typer
        "pydantic>=2",  # Config and output schema validation
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output for --display yaml
        "pygments",  # Highlighted structured output on a TTY
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "agentlink=agentlink.cli:main",
        ],
    },
)
