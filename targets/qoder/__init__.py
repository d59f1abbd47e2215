from .adapter import QoderTarget
from .writer import QoderPaths, resolve_qoder_paths, write_qoder_bundle

__all__ = [
    'QoderTarget',
    'QoderPaths',
    'resolve_qoder_paths',
    'write_qoder_bundle',
]
