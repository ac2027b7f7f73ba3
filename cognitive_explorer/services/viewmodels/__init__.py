"""
View models for the explorer pages.

Each view model holds the mutable form state of one page, rebuilds its
request descriptors on demand and surfaces JSON results or error strings.
"""

from cognitive_explorer.services.viewmodels.base import BaseViewModel
from cognitive_explorer.services.viewmodels.face import FaceViewModel
from cognitive_explorer.services.viewmodels.person_group import PersonGroupViewModel
from cognitive_explorer.services.viewmodels.profiles import ProfileViewModel
from cognitive_explorer.services.viewmodels.text import TextViewModel

__all__ = [
    "BaseViewModel",
    "FaceViewModel",
    "PersonGroupViewModel",
    "ProfileViewModel",
    "TextViewModel",
]
