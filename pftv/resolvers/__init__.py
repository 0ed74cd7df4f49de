"""
Resolvers - One module per video host.

Every module here (other than ``base``) is imported by the
ResolverManager, which registers its concrete BaseResolver subclasses.
"""

from pftv.resolvers.base import BaseResolver

__all__ = ["BaseResolver"]
