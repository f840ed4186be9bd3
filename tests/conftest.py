"""
Shared fixtures for the stream decoder tests
"""

import os
import sys
import logging
import pytest

# Add the parent directory to sys.path to allow direct imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from mtstream.reader import SerializationProperties, SystemType


@pytest.fixture
def mac():
    """Big-endian Mac serialization properties"""
    return SerializationProperties.for_system(SystemType.MAC)


@pytest.fixture
def win():
    """Little-endian Windows serialization properties"""
    return SerializationProperties.for_system(SystemType.WINDOWS)


@pytest.fixture(params=[SystemType.MAC, SystemType.WINDOWS], ids=['mac', 'win'])
def sp(request):
    """Serialization properties for each platform"""
    return SerializationProperties.for_system(request.param)


@pytest.fixture
def restore_logging():
    """Remove the handlers setup_logging installs on the root logger"""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
