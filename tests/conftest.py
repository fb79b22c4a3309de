"""
Shared pytest fixtures for all tests
"""
import django
import pytest
from django.conf import settings


def pytest_configure():
    # Minimal Django setup so the template library can be loaded
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=["marksyntax"],
            TEMPLATES=[
                {
                    "BACKEND": "django.template.backends.django.DjangoTemplates",
                    "APP_DIRS": True,
                }
            ],
        )
        django.setup()


@pytest.fixture
def physics_document() -> str:
    """A lesson mixing every kind of extended syntax"""
    return (
        "# Physics\n"
        "Newton: ![$F = ma$](eq:F=m*a)\n"
        "[[Simulation:pendulum]]\n"
        "Energy $E = mc^2$ and\n"
        "$$\\int_0^1 x^2 dx$$\n"
        "![Wave](video:wave%20demo.mp4)\n"
    )


@pytest.fixture
def protocol_document() -> str:
    return "[[Simulation:a]]\n[[Simulation:b]]\n[[Video:c]]\n![](quiz:d)"
