"""
Orbitools

Host-independent core of the Orbitools block-editor toolkit:

- spacing: spacing/breakpoint configuration resolver
- cache: namespaced TTL caches
- layout: flex attributes, class builders, responsive class fan-out
- adminkit: admin settings framework (fields, save, notices)
- typography: typography presets and their CSS
"""

__version__ = "1.0.0"


class OrbitoolsError(Exception):
    """Base error for Orbitools"""
    pass


class ConfigSourceError(OrbitoolsError):
    """A configuration source is missing, unreadable or malformed"""
    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")
