# -*- coding: utf-8 -*-
"""Установка."""
from setuptools import find_packages, setup

# Основные зависимости клиента консоли
install_requires = [
    "httpx>=0.27.2",
    "pydantic>=2.9.2",
    "pydantic-settings>=2.11.0",  # Для ConsoleClientSettings и LoggerConfig
    "structlog>=25.4.0",
]

# Зависимости для тестов
tests_require = [
    "pytest>=8.3",
    "pytest-asyncio>=0.24",
]

setup(
    name="mqx-console-client",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=install_requires,
    extras_require={"test": tests_require},
)
