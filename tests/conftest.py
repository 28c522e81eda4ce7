"""Tests."""

import argparse

import pytest
import torch

pytest_plugins = ["tests.fixtures"]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Pytest arg parser."""
    parser.addoption(
        "--cpu",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="use CPU for tests",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register markers."""
    config.addinivalue_line("markers", "gpu: test requiring CUDA")


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Skip GPU tests when CUDA is unavailable or CPU is forced."""
    if torch.cuda.is_available() and not config.getoption("--cpu"):
        return
    skip_gpu = pytest.mark.skip(reason="CUDA unavailable or --cpu given")
    for item in items:
        if "gpu" in item.keywords:
            item.add_marker(skip_gpu)
