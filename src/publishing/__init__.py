"""Publishing configuration assembly.

- models.py: caller settings and the immutable configuration sections
- assembler.py: composition of identity, major version and settings
- serialization.py: JSON/YAML rendering for the scaffolding engine
"""

from .assembler import PublishingConfigAssembler, check_required
from .models import ProjectSettings, PublishingConfig
from .serialization import render, to_dict

__all__ = [
    "PublishingConfigAssembler",
    "check_required",
    "ProjectSettings",
    "PublishingConfig",
    "render",
    "to_dict",
]
