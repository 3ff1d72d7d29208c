"""Shared pytest fixtures and configuration for the test suite."""

import json
from unittest.mock import MagicMock

import pytest

SAMPLE_TRANSCRIPTION = "I need to call Sarah back and email the team. Also want to research that new AI tool."


@pytest.fixture
def mock_config():
    """Provide a mock config object with default values."""
    config = MagicMock()
    config.log_level = "WARNING"
    config.output_format = "json"
    config.json_indent = 2
    config.prompt = "> "
    return config


@pytest.fixture
def sample_transcription():
    """Provide the transcription a Fieldy device sends in its example webhook."""
    return SAMPLE_TRANSCRIPTION


@pytest.fixture
def sample_payload():
    """Provide a webhook payload as posted by a Fieldy device."""
    return {
        "date": "2025-06-01T09:30:00Z",
        "transcription": SAMPLE_TRANSCRIPTION,
        "transcriptions": [
            {
                "text": "I need to call Sarah back and email the team.",
                "speaker": "A",
                "start": 0.04,
                "end": 3.2,
                "duration": 3.16,
            }
        ],
    }


@pytest.fixture
def payload_file(tmp_path, sample_payload):
    """Write the sample payload to a JSON file and return its path."""
    path = tmp_path / "payload.json"
    path.write_text(json.dumps(sample_payload))
    return path


# Configure pytest-asyncio
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "asyncio: mark test as an async test")
