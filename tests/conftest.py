"""
Shared fixtures for the resume extraction tests.
"""
import pytest

from resume_extraction.config import Settings
from resume_extraction.services.clients import reset_provider_clients


SAMPLE_RESUME = """
Jane Doe
Software Engineer
New York, United States

Education
Bachelor of Science in Computer Science - 2018

Skills:
- JavaScript, Python, Java
- React, Node.js, Angular
- SQL, MongoDB, AWS
- Docker, Kubernetes

Experience

2018 - 2020
Junior Developer at Startup Inc
Worked on frontend.

2020 - Present
Senior Developer at Tech Corp
Leading the team.
"""


@pytest.fixture
def sample_resume():
    return SAMPLE_RESUME


@pytest.fixture
def settings():
    """Settings isolated from the developer's environment and .env file."""
    return Settings(
        _env_file=None,
        gemini_api_key="",
        openai_api_key="",
        prefer_openai=False,
    )


@pytest.fixture(autouse=True)
def _reset_clients():
    reset_provider_clients()
    yield
    reset_provider_clients()
