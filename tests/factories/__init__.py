"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import ProjectFactory, ConsultantProfileFactory, ...
"""

from tests.factories.base import BaseFactory, utc_now
from tests.factories.consultant import ConsultantProfileFactory
from tests.factories.project import ProjectFactory, ProjectMatchFactory

__all__ = [
    # Base
    "BaseFactory",
    "utc_now",
    # Consultant
    "ConsultantProfileFactory",
    # Project
    "ProjectFactory",
    "ProjectMatchFactory",
]
