"""Low-level geometry: vector helpers and revolution profiles."""

from shapegen.geometry import vector
from shapegen.geometry.profile import Profile, capsule_profile

__all__ = ["vector", "Profile", "capsule_profile"]
