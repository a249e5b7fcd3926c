from setuptools import setup, find_packages

install_requires = [
    # --- UI & REACTIVE ---
    # FletX pre-releases track the newer Flet API:
    # uv pip install FletXr --pre
    "flet>=0.70.0,<1.0",
    "FletXr",

    # --- CONFIGURATION ---
    "pydantic>=2.0.0",
    "python-dotenv>=1.0.0",
    "pyyaml>=6.0.0",
]

setup(
    name="statelab",
    version="0.1.0",
    description="StateLab - ephemeral vs. shared state counter demos for Flet",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=install_requires,
    extras_require={
        # --- TESTS ---
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "statelab-ephemeral=statelab.ephemeral.main:run",
            "statelab-shared=statelab.app_state.main:run",
        ],
    },
    python_requires=">=3.11",
)
