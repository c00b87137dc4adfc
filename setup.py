from setuptools import setup, find_packages

install_requires = [
    # --- DOMAIN & CONFIG ---
    "pydantic>=2.0.0",
    "python-dotenv>=1.0.0",
    "pyyaml>=6.0.0",

    # --- REMOTE API ---
    "httpx>=0.27.0",

    # --- SHOWROOM / STREAMLIT ---
    "streamlit>=1.50.0",        # Core UI framework for the showroom
    "watchdog",                 # Auto-reload during development

    # --- TESTS---
    "pytest-asyncio==1.3.0",
    "pytest"
]

setup(
    name="Comfort_Catalogue",
    version="1.0.0",
    description="Comfort|Catalogue",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"catalogue": ["shared/config/settings/*.yaml"]},
    include_package_data=True,
    install_requires=install_requires,
    python_requires=">=3.11",
)
